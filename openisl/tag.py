"""Listing, creating and deleting tags."""

from __future__ import annotations

import os
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from .command import run

PathLike = str | os.PathLike[str]

_TAG_FORMAT = (
    "--format=%(refname:short)|%(taggername)|%(taggeremail)"
    "|%(contents:subject)|%(creatordate:iso)"
)


@contextmanager
def _context(message: str) -> Iterator[None]:
    try:
        yield
    except Exception as exc:
        exc.add_note(message)
        raise


@dataclass
class Tag:
    """A tag and, for annotated tags, its tagger details."""

    name: str
    tagger: str = ""
    email: str = ""
    message: str = ""
    date: str = ""
    is_annotated: bool = False


def parse_tags(output: str) -> list[Tag]:
    """Parse the output of ``git tag -l`` with the listing format."""
    tags = []
    for line in output.splitlines():
        if not line.strip():
            continue
        parts = line.split("|", 4)
        fields = parts + [""] * (5 - len(parts))
        name, tagger, email, message, date = fields
        tags.append(
            Tag(
                name=name,
                tagger=tagger,
                email=email,
                message=message,
                date=date,
                is_annotated=len(parts) > 1 and bool(parts[1]),
            )
        )
    return tags


def tag_list(repo_path: PathLike) -> list[Tag]:
    """Return every tag in the repository."""
    with _context("Failed to list tags"):
        output = run(["tag", "-l", _TAG_FORMAT], repo_path)
    return parse_tags(output)


def create_tag(
    repo_path: PathLike,
    name: str,
    message: str | None = None,
    commit: str | None = None,
) -> None:
    """Create a tag; it is annotated when a message is given."""
    args = ["tag"]
    if message is not None:
        args += ["-a", name, "-m", message]
    else:
        args.append(name)
    if commit is not None:
        args.append(commit)
    with _context(f"Failed to create tag '{name}'"):
        run(args, repo_path)


def delete_tag(repo_path: PathLike, name: str) -> None:
    """Delete a tag."""
    with _context(f"Failed to delete tag '{name}'"):
        run(["tag", "-d", name], repo_path)


def show_tag(repo_path: PathLike, name: str) -> str:
    """Return the tag names matching ``name``."""
    with _context(f"Failed to show tag '{name}'"):
        return run(["tag", "-l", name], repo_path)