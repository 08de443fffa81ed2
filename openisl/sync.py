"""Divergence between the current branch and its upstream."""

from __future__ import annotations

import os
from collections.abc import Iterator
from contextlib import contextmanager

from .branch import get_current_branch
from .command import run_raw
from .status import StatusType, get_status
from .vcs import SyncState

PathLike = str | os.PathLike[str]


@contextmanager
def _context(message: str) -> Iterator[None]:
    try:
        yield
    except Exception as exc:
        exc.add_note(message)
        raise


def _tracking_remote(repo_path: PathLike, branch: str) -> tuple[str | None, str | None]:
    with _context("Failed to get tracking remote"):
        result = run_raw(
            ["rev-parse", "--abbrev-ref", "--symbolic-full-name", f"{branch}@{{u}}"],
            repo_path,
        )
    if result.returncode != 0:
        return None, None

    tracking = result.stdout.decode("utf-8", errors="replace").strip()
    if not tracking or "@" in tracking:
        return None, None
    remote, sep, remote_branch = tracking.partition("/")
    if not sep:
        return None, None
    return remote, remote_branch


def _count(repo_path: PathLike, revision_range: str, message: str) -> int | None:
    with _context(message):
        result = run_raw(["rev-list", "--count", revision_range], repo_path)
    if result.returncode != 0:
        return None
    text = result.stdout.decode("utf-8", errors="replace").strip()
    return int(text) if text.isascii() and text.isdigit() else None


def get_sync_state(repo_path: PathLike) -> SyncState:
    """Return ahead/behind counts against the upstream and whether conflicts exist."""
    state = SyncState()

    branch = get_current_branch(repo_path)
    if branch is None:
        return state

    remote, remote_branch = _tracking_remote(repo_path, branch)
    state.remote_name = remote

    if remote is not None and remote_branch is not None:
        remote_ref = f"{remote}/{remote_branch}"
        state.local_unpushed = _count(
            repo_path, f"HEAD...{remote_ref}", "Failed to get ahead count"
        )
        state.remote_unpulled = _count(
            repo_path, f"{remote_ref}...HEAD", "Failed to get behind count"
        )

    state.has_conflicts = any(
        file.status is StatusType.CONFLICTED for file in get_status(repo_path)
    )
    return state