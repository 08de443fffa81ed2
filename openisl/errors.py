"""Exceptions raised by git operations."""

from __future__ import annotations


class GitError(Exception):
    """Base class for every git-related failure."""


class NotAGitRepositoryError(GitError):
    """The given path is not inside a git repository."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"not a git repository: {path}")


class RepositoryNotFoundError(GitError):
    """No repository root could be found above a path."""

    def __init__(self) -> None:
        super().__init__("git repository not found")


class CommandFailedError(GitError):
    """A git command exited with a non-zero status."""

    def __init__(self, stderr: str) -> None:
        self.stderr = stderr
        super().__init__(f"git command failed: {stderr}")


class GitParseError(GitError):
    """Output from git could not be understood."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"failed to parse git output: {detail}")


class UnknownGitError(GitError):
    """Any other failure."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"unknown error: {detail}")