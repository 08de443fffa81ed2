"""Listing and creating branches."""

from __future__ import annotations

import os
from collections.abc import Iterator
from contextlib import contextmanager

from .command import run
from .models import GitRef, RefType

PathLike = str | os.PathLike[str]


@contextmanager
def _context(message: str) -> Iterator[None]:
    try:
        yield
    except Exception as exc:
        exc.add_note(message)
        raise


def _ref_type_for(name: str) -> RefType:
    if name.startswith("refs/heads/"):
        return RefType.BRANCH
    if name.startswith("refs/remotes/"):
        return RefType.REMOTE
    if name.startswith("refs/tags/"):
        return RefType.TAG
    if name == "HEAD":
        return RefType.HEAD
    return RefType.BRANCH


def parse_branches(output: str) -> list[GitRef]:
    """Parse ``git branch --format=...`` output into references."""
    refs = []
    for line in output.splitlines():
        if not line.strip():
            continue
        name = line.split("|", 1)[0]
        refs.append(GitRef(name=name, ref_type=_ref_type_for(name)))
    return refs


def get_branches(repo_path: PathLike) -> list[GitRef]:
    """Return the local branches of the repository."""
    with _context("Failed to get git branches"):
        output = run(
            ["branch", "--format=%(refname:short)|%(refname:short)"], repo_path
        )
    return parse_branches(output)


def get_current_branch(repo_path: PathLike) -> str | None:
    """Return the checked-out branch, or None when HEAD is detached."""
    with _context("Failed to get current branch"):
        output = run(["branch", "--show-current"], repo_path)
    branch = output.strip()
    return branch or None


def create_branch(repo_path: PathLike, branch_name: str) -> None:
    """Create a branch at HEAD without switching to it."""
    with _context(f"Failed to create branch '{branch_name}'"):
        run(["branch", branch_name], repo_path)


def create_branch_from_commit(
    repo_path: PathLike, branch_name: str, commit_hash: str
) -> None:
    """Create a branch at ``commit_hash`` and switch to it."""
    with _context(
        f"Failed to create branch '{branch_name}' from '{commit_hash}'"
    ):
        run(["checkout", "-b", branch_name, commit_hash], repo_path)