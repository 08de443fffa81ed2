"""Commits and references as read from git."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class RefType(Enum):
    """Kind of a git reference."""

    HEAD = "Head"
    BRANCH = "Branch"
    TAG = "Tag"
    REMOTE = "Remote"


_REF_PREFIXES = {
    RefType.HEAD: "",
    RefType.BRANCH: "branch: ",
    RefType.TAG: "tag: ",
    RefType.REMOTE: "remote: ",
}


def _format_date(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def _parse_date(text: str) -> datetime:
    value = datetime.fromisoformat(text)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass
class GitRef:
    """A named reference such as a branch or tag."""

    name: str
    ref_type: RefType

    def __str__(self) -> str:
        return f"{_REF_PREFIXES[self.ref_type]}{self.name}"

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "ref_type": self.ref_type.value}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GitRef:
        return cls(name=data["name"], ref_type=RefType(data["ref_type"]))


@dataclass
class Commit:
    """A single commit with its metadata."""

    hash: str
    short_hash: str
    message: str
    summary: str
    author: str
    email: str
    date: datetime
    parent_hashes: list[str] = field(default_factory=list)
    refs: list[GitRef] = field(default_factory=list)

    def __str__(self) -> str:
        return f"{self.short_hash} - {self.summary}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "hash": self.hash,
            "short_hash": self.short_hash,
            "message": self.message,
            "summary": self.summary,
            "author": self.author,
            "email": self.email,
            "date": _format_date(self.date),
            "parent_hashes": list(self.parent_hashes),
            "refs": [ref.to_dict() for ref in self.refs],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Commit:
        return cls(
            hash=data["hash"],
            short_hash=data["short_hash"],
            message=data["message"],
            summary=data["summary"],
            author=data["author"],
            email=data["email"],
            date=_parse_date(data["date"]),
            parent_hashes=list(data["parent_hashes"]),
            refs=[GitRef.from_dict(ref) for ref in data["refs"]],
        )

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)

    @classmethod
    def from_json(cls, text: str) -> Commit:
        return cls.from_dict(json.loads(text))