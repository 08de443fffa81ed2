"""Remotes and network operations."""

from __future__ import annotations

import os
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from .command import run

PathLike = str | os.PathLike[str]


@contextmanager
def _context(message: str) -> Iterator[None]:
    try:
        yield
    except Exception as exc:
        exc.add_note(message)
        raise


@dataclass
class Remote:
    """A configured remote as listed by ``git remote -v``."""

    name: str
    url: str
    fetch_type: str = ""


def parse_remotes(output: str) -> list[Remote]:
    """Parse ``git remote -v`` output, splitting each line on spaces."""
    remotes = []
    for line in output.splitlines():
        if not line.strip():
            continue
        parts = line.split(" ", 2)
        if len(parts) >= 2:
            remotes.append(
                Remote(
                    name=parts[0],
                    url=parts[1],
                    fetch_type=parts[2] if len(parts) > 2 else "",
                )
            )
    return remotes


def fetch(repo_path: PathLike, remote: str | None = None, prune: bool = False) -> str:
    """Fetch from a remote, or from the default one."""
    args = ["fetch"]
    if remote is not None:
        args.append(remote)
    if prune:
        args.append("--prune")
    with _context(f"Failed to fetch from remote: {remote!r}"):
        return run(args, repo_path)


def pull(repo_path: PathLike, rebase: bool = False) -> str:
    """Pull into the current branch."""
    args = ["pull"]
    if rebase:
        args.append("--rebase")
    with _context("Failed to pull changes"):
        return run(args, repo_path)


def push(
    repo_path: PathLike,
    remote: str | None = None,
    branch: str | None = None,
    tags: bool = False,
    set_upstream: bool = False,
) -> str:
    """Push a branch, or only the tags when ``tags`` is set."""
    if tags:
        with _context("Failed to push tags"):
            return run(["push", "--tags"], repo_path)

    args = ["push"]
    if remote is not None:
        args.append(remote)
    if branch is not None:
        args.append(branch)
    if set_upstream:
        args.append("--set-upstream")
    with _context("Failed to push changes"):
        return run(args, repo_path)


def remote_add(repo_path: PathLike, name: str, url: str) -> None:
    """Add a remote."""
    with _context(f"Failed to add remote '{name}' at {url}"):
        run(["remote", "add", name, url], repo_path)


def remote_list(repo_path: PathLike) -> list[Remote]:
    """List the configured remotes."""
    with _context("Failed to list remotes"):
        output = run(["remote", "-v"], repo_path)
    return parse_remotes(output)


def remote_remove(repo_path: PathLike, name: str) -> None:
    """Remove a remote."""
    with _context(f"Failed to remove remote '{name}'"):
        run(["remote", "remove", name], repo_path)