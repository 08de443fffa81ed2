"""Version-control-neutral data types and conversions from git models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from . import models


class RefType(Enum):
    """Kind of a reference, independent of the version control system."""

    HEAD = "Head"
    BRANCH = "Branch"
    TAG = "Tag"
    REMOTE = "Remote"

    @classmethod
    def from_git(cls, ref_type: models.RefType) -> RefType:
        return cls[ref_type.name]

    def to_git(self) -> models.RefType:
        return models.RefType[self.name]


_REF_PREFIXES = {
    RefType.HEAD: "",
    RefType.BRANCH: "branch: ",
    RefType.TAG: "tag: ",
    RefType.REMOTE: "remote: ",
}


@dataclass
class Ref:
    """A named reference: branch, tag, bookmark and the like."""

    name: str
    ref_type: RefType

    def __str__(self) -> str:
        return f"{_REF_PREFIXES[self.ref_type]}{self.name}"

    @classmethod
    def from_git_ref(cls, git_ref: models.GitRef) -> Ref:
        return cls(name=git_ref.name, ref_type=RefType.from_git(git_ref.ref_type))

    def to_git_ref(self) -> models.GitRef:
        return models.GitRef(name=self.name, ref_type=self.ref_type.to_git())


@dataclass
class Change:
    """A commit or revision."""

    id: str
    short_id: str
    message: str
    summary: str
    author: str
    email: str
    date: datetime
    parent_ids: list[str] = field(default_factory=list)
    refs: list[Ref] = field(default_factory=list)

    def __str__(self) -> str:
        return f"{self.short_id} - {self.summary}"

    @classmethod
    def from_commit(cls, commit: models.Commit) -> Change:
        return cls(
            id=commit.hash,
            short_id=commit.short_hash,
            message=commit.message,
            summary=commit.summary,
            author=commit.author,
            email=commit.email,
            date=commit.date,
            parent_ids=list(commit.parent_hashes),
            refs=[Ref.from_git_ref(ref) for ref in commit.refs],
        )

    def to_commit(self) -> models.Commit:
        return models.Commit(
            hash=self.id,
            short_hash=self.short_id,
            message=self.message,
            summary=self.summary,
            author=self.author,
            email=self.email,
            date=self.date,
            parent_hashes=list(self.parent_ids),
            refs=[ref.to_git_ref() for ref in self.refs],
        )


@dataclass
class SyncState:
    """How the local branch has diverged from the remote it tracks."""

    remote_name: str | None = None
    local_unpushed: int | None = None
    remote_unpulled: int | None = None
    has_conflicts: bool = False


@dataclass
class ChangeCount:
    """Lines added and removed."""

    additions: int = 0
    deletions: int = 0


@dataclass
class SavedWork:
    """Work put aside, such as a stash entry."""

    id: str
    timestamp: datetime
    message: str | None = None
    files_affected: list[str] = field(default_factory=list)
    change_count: ChangeCount = field(default_factory=ChangeCount)


@dataclass
class HistoryPoint:
    """A point in the history of reference movements."""

    id: str
    timestamp: datetime
    action: str
    description: str
    refs: list[Ref] = field(default_factory=list)


class HistoryEditAction(Enum):
    """What to do with a change while editing history."""

    KEEP = "Keep"
    REVISE = "Revise"
    COMBINE = "Combine"
    REMOVE = "Remove"
    EDIT = "Edit"


@dataclass
class HistoryEditPlanEntry:
    """One change in a history edit plan."""

    change_id: str
    action: HistoryEditAction
    message: str | None = None


@dataclass
class HistoryEditPlan:
    """An ordered list of history edit steps."""

    changes: list[HistoryEditPlanEntry] = field(default_factory=list)


class ChangeSegment(Enum):
    """Whether a segment of a change is kept when staging selectively."""

    INCLUDE = "Include"
    EXCLUDE = "Exclude"


@dataclass
class ChangePatch:
    """Selection of segments within one file."""

    file_path: str
    segments: list[ChangeSegment] = field(default_factory=list)