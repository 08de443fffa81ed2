"""Staging and unstaging changes."""

from __future__ import annotations

import os
from collections.abc import Iterator
from contextlib import contextmanager

from .command import run

PathLike = str | os.PathLike[str]

_STAGED_PREFIXES = ("M ", "A ", "D ", "R ")
_UNSTAGED_PREFIXES = (" M", " A", " D")


@contextmanager
def _context(message: str) -> Iterator[None]:
    try:
        yield
    except Exception as exc:
        exc.add_note(message)
        raise


def _non_empty_lines(output: str) -> list[str]:
    return [line for line in output.splitlines() if line.strip()]


def stage_file(repo_path: PathLike, file: str) -> None:
    """Stage one file."""
    with _context(f"Failed to stage file: {file}"):
        run(["add", file], repo_path)


def stage_all(repo_path: PathLike) -> None:
    """Stage every change, including untracked and deleted files."""
    with _context("Failed to stage all files"):
        run(["add", "-A"], repo_path)


def unstage_file(repo_path: PathLike, file: str) -> None:
    """Remove one file from the index, keeping the working tree."""
    with _context(f"Failed to unstage file: {file}"):
        run(["reset", "--", file], repo_path)


def unstage_all(repo_path: PathLike) -> None:
    """Reset the index to HEAD."""
    with _context("Failed to unstage all files"):
        run(["reset", "HEAD"], repo_path)


def stage_hunk(repo_path: PathLike, file: str, hunk_start: int, hunk_end: int) -> None:
    """Apply a patch read from standard input to the index."""
    with _context(f"Failed to stage hunk for file: {file}"):
        run(["apply", "--cached", "-"], repo_path)


def get_staged_files(repo_path: PathLike) -> list[str]:
    """Return the paths with staged changes."""
    with _context("Failed to get staged files"):
        output = run(["diff", "--cached", "--name-only"], repo_path)
    return _non_empty_lines(output)


def get_unstaged_files(repo_path: PathLike) -> list[str]:
    """Return the tracked paths with unstaged changes."""
    with _context("Failed to get unstaged files"):
        output = run(["diff", "--name-only"], repo_path)
    return _non_empty_lines(output)


def has_staged_changes(repo_path: PathLike) -> bool:
    """Tell whether any file is modified, added, deleted or renamed in the index only."""
    with _context("Failed to check for staged changes"):
        output = run(["status", "--porcelain"], repo_path)
    return any(line.startswith(_STAGED_PREFIXES) for line in _non_empty_lines(output))


def has_unstaged_changes(repo_path: PathLike) -> bool:
    """Tell whether any tracked file has changes only in the working tree."""
    with _context("Failed to check for unstaged changes"):
        output = run(["status", "--porcelain"], repo_path)
    return any(line.startswith(_UNSTAGED_PREFIXES) for line in _non_empty_lines(output))