"""Switching branches and commits."""

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


def checkout(repo_path: PathLike, target: str) -> None:
    """Check out a branch or any other revision."""
    with _context(f"Failed to checkout '{target}'"):
        run(["checkout", target], repo_path)


def checkout_commit(repo_path: PathLike, commit_hash: str) -> None:
    """Check out a commit, leaving HEAD detached."""
    with _context(f"Failed to checkout commit '{commit_hash}'"):
        run(["checkout", commit_hash], repo_path)