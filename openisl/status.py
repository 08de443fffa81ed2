"""Working tree status."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum

from .command import run


class StatusType(Enum):
    """State of one file in the working tree; the value is its label."""

    MODIFIED = "Modified"
    ADDED = "Added"
    DELETED = "Deleted"
    UNTRACKED = "Untracked"
    MODIFIED_STAGED = "Modified (staged)"
    ADDED_STAGED = "Added (staged)"
    DELETED_STAGED = "Deleted (staged)"
    RENAMED = "Renamed"
    CONFLICTED = "Conflicted"


_STATUS_CODES = {
    " M": StatusType.MODIFIED,
    "M ": StatusType.MODIFIED_STAGED,
    "A ": StatusType.ADDED_STAGED,
    "AM": StatusType.ADDED,
    " D": StatusType.DELETED,
    "D ": StatusType.DELETED_STAGED,
    "??": StatusType.UNTRACKED,
    "R ": StatusType.RENAMED,
    "UU": StatusType.CONFLICTED,
}


@dataclass
class FileStatus:
    """A path and its status."""

    path: str
    status: StatusType


def parse_status(output: str) -> list[FileStatus]:
    """Parse ``git status --porcelain`` output."""
    files = []
    for raw in output.split("\n"):
        line = raw.removesuffix("\r")
        if not line.strip() or len(line) < 4:
            continue
        status = _STATUS_CODES.get(line[:2], StatusType.MODIFIED)
        files.append(FileStatus(path=line[3:].strip(), status=status))
    return files


def get_status(repo_path: str | os.PathLike[str]) -> list[FileStatus]:
    """Return the status of every changed file in the repository."""
    return parse_status(run(["status", "--porcelain"], repo_path))