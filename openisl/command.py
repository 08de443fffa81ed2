"""Running git and locating repositories."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Sequence
from pathlib import Path

from .errors import CommandFailedError, RepositoryNotFoundError

PathLike = str | os.PathLike[str]


def run_raw(args: Sequence[str], cwd: PathLike | None = None) -> subprocess.CompletedProcess[bytes]:
    """Run git with ``args`` and return the completed process, whatever its status."""
    return subprocess.run(["git", *args], cwd=cwd, capture_output=True, check=False)


def _decode(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def _checked(args: Sequence[str], cwd: PathLike | None) -> subprocess.CompletedProcess[bytes]:
    result = run_raw(args, cwd)
    if result.returncode != 0:
        raise CommandFailedError(_decode(result.stderr))
    return result


def run(args: Sequence[str], cwd: PathLike | None = None) -> str:
    """Run git and return its standard output; raise on failure."""
    return _decode(_checked(args, cwd).stdout)


def run_success(args: Sequence[str], cwd: PathLike | None = None) -> None:
    """Run git, discarding output; raise on failure."""
    _checked(args, cwd)


def find_repo_root(path: PathLike) -> Path:
    """Return the nearest directory at or above ``path`` that holds a ``.git`` entry."""
    current = Path(path).resolve(strict=True)
    for candidate in (current, *current.parents):
        if (candidate / ".git").exists():
            return candidate
    raise RepositoryNotFoundError()


def is_git_repo(path: PathLike) -> bool:
    """Tell whether ``path`` or any of its parents holds a ``.git`` entry."""
    current = Path(path)
    while True:
        if (current / ".git").exists():
            return True
        parent = current.parent
        if parent == current:
            return False
        current = parent