"""Operations that rewrite or create commits."""

from __future__ import annotations

import os
from collections.abc import Iterator
from contextlib import contextmanager

from .command import run, run_success

PathLike = str | os.PathLike[str]


@contextmanager
def _context(message: str) -> Iterator[None]:
    try:
        yield
    except Exception as exc:
        exc.add_note(message)
        raise


def amend_commit(repo_path: PathLike, message: str | None = None) -> None:
    """Amend HEAD, replacing its message when one is given."""
    if message is not None:
        with _context("Failed to amend commit with message"):
            run_success(["commit", "--amend", "-m", message], repo_path)
    else:
        with _context("Failed to amend commit"):
            run_success(["commit", "--amend", "--no-edit"], repo_path)


def drop_commit(repo_path: PathLike, commit_hash: str) -> None:
    """Remove a commit from history by rebasing what follows onto its parent."""
    with _context(f"Failed to drop commit {commit_hash}"):
        run_success(["rebase", "--onto", f"^{commit_hash}", commit_hash], repo_path)


def squash_commits(repo_path: PathLike, commit_hash: str, message: str) -> None:
    """Fold every commit after ``commit_hash`` into one new commit."""
    with _context(f"Failed to reset to {commit_hash}"):
        run_success(["reset", "--soft", commit_hash], repo_path)
    with _context("Failed to create squashed commit"):
        run_success(["commit", "-m", message], repo_path)


def get_commit_message(repo_path: PathLike, commit_hash: str) -> str:
    """Return the raw message of a commit."""
    with _context(f"Failed to get message for commit {commit_hash}"):
        return run(["log", "-1", "--format=%B", commit_hash], repo_path)


def tag_commit(
    repo_path: PathLike,
    commit_hash: str,
    tag_name: str,
    message: str | None = None,
) -> None:
    """Create an annotated tag on a commit."""
    args = ["tag", "-a", tag_name, commit_hash]
    if message is not None:
        args += ["-m", message]
    with _context(f"Failed to tag commit {commit_hash} as {tag_name}"):
        run_success(args, repo_path)


def cherry_pick_commit(repo_path: PathLike, commit_hash: str) -> None:
    """Apply a commit on top of HEAD."""
    with _context(f"Failed to cherry-pick commit {commit_hash}"):
        run_success(["cherry-pick", commit_hash], repo_path)


def revert_commit(repo_path: PathLike, commit_hash: str) -> None:
    """Create a commit that undoes ``commit_hash``."""
    with _context(f"Failed to revert commit {commit_hash}"):
        run_success(["revert", commit_hash], repo_path)