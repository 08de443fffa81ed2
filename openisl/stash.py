"""Stash entries and stash operations."""

from __future__ import annotations

import os
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from .command import run

PathLike = str | os.PathLike[str]

_STASH_FORMAT = "--format=%gd|%gs|%h|%an|%ae|%ci"


@contextmanager
def _context(message: str) -> Iterator[None]:
    try:
        yield
    except Exception as exc:
        exc.add_note(message)
        raise


@dataclass
class StashEntry:
    """One entry of the stash list."""

    name: str
    message: str
    hash: str
    author: str
    email: str
    date: str


def parse_stash_list(output: str) -> list[StashEntry]:
    """Parse ``git stash list`` output; lines with too few fields are skipped."""
    entries = []
    for line in output.splitlines():
        if not line.strip():
            continue
        parts = line.split("|", 5)
        if len(parts) >= 6:
            name, message, hash_, author, email, date = parts
            entries.append(
                StashEntry(
                    name=name,
                    message=message,
                    hash=hash_,
                    author=author,
                    email=email,
                    date=date,
                )
            )
    return entries


def get_stash_list(repo_path: PathLike) -> list[StashEntry]:
    """Return the stash entries, newest first."""
    with _context("Failed to get stash list"):
        output = run(["stash", "list", _STASH_FORMAT], repo_path)
    return parse_stash_list(output)


def _stash_command(
    repo_path: PathLike, action: str, stash_index: str | None, message: str
) -> None:
    args = ["stash", action]
    if stash_index is not None:
        args.append(stash_index)
    with _context(message):
        run(args, repo_path)


def stash_push(repo_path: PathLike, message: str | None = None) -> None:
    """Stash the working tree changes, optionally with a message."""
    args = ["stash", "push"]
    if message is not None:
        args += ["-m", message]
    with _context("Failed to stash changes"):
        run(args, repo_path)


def stash_pop(repo_path: PathLike, stash_index: str | None = None) -> None:
    """Apply a stash entry and remove it."""
    _stash_command(repo_path, "pop", stash_index, "Failed to pop stash")


def stash_apply(repo_path: PathLike, stash_index: str | None = None) -> None:
    """Apply a stash entry and keep it."""
    _stash_command(repo_path, "apply", stash_index, "Failed to apply stash")


def stash_drop(repo_path: PathLike, stash_index: str | None = None) -> None:
    """Remove a stash entry."""
    _stash_command(repo_path, "drop", stash_index, "Failed to drop stash")


def stash_show(repo_path: PathLike, stash_index: str) -> str:
    """Return the patch held by a stash entry."""
    with _context("Failed to show stash diff"):
        return run(["stash", "show", "-p", stash_index], repo_path)