"""Reading diffs."""

from __future__ import annotations

import os
from collections.abc import Iterator
from contextlib import contextmanager

from .command import run

PathLike = str | os.PathLike[str]


@contextmanager
def _context(message: str) -> Iterator[None]:
    try:
        yield
    except Exception as exc:
        exc.add_note(message)
        raise


def get_diff(
    repo_path: PathLike, commit: str | None = None, staged: bool = False
) -> str:
    """Return the working tree diff, optionally staged or against a commit."""
    args = ["diff"]
    if staged:
        args.append("--staged")
    if commit is not None:
        args.append(commit)
    with _context(f"Failed to get diff for commit: {commit!r}"):
        return run(args, repo_path)


def _parent_hash(repo_path: PathLike, commit_hash: str) -> str:
    with _context(f"Failed to get parent hash for: {commit_hash}"):
        output = run(["rev-list", "--parents", "-n", "1", commit_hash], repo_path)
    parts = output.split()
    return parts[1] if len(parts) > 1 else ""


def _commit_content(commit_hash: str) -> str:
    with _context(f"Failed to get commit content for: {commit_hash}"):
        output = run(["show", "--no-patch", commit_hash], None)
    return (
        f"Initial commit: {output.strip()}\n\n"
        "No parent diff available (use 'git show' for details)"
    )


def get_commit_diff(repo_path: PathLike, commit_hash: str) -> str:
    """Return the diff a commit introduced relative to its first parent."""
    with _context(f"Failed to get parent of commit: {commit_hash}"):
        parent = _parent_hash(repo_path, commit_hash)
    if not parent:
        return _commit_content(commit_hash)
    with _context(f"Failed to get diff between {parent} and {commit_hash}"):
        return run(["diff", parent, commit_hash], repo_path)