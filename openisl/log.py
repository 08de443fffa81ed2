"""Reading the commit log."""

from __future__ import annotations

import os
import re
from datetime import datetime, timezone

from .command import run
from .models import Commit

GIT_LOG_FORMAT = "%H|%P|%an|%ae|%ad|%s"

_KNOWN_OFFSETS = (
    "+0000", "+0100", "+0200", "+0300", "+0400", "+0500", "+0530", "+0600",
    "+0700", "+0800", "+0900", "+1000",
    "-0000", "-0100", "-0200", "-0300", "-0400", "-0500", "-0530", "-0600",
    "-0700", "-0800", "-0900", "-1000",
)

_RFC3339 = re.compile(
    r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(?:\.\d+)?(?:Z|[+-]\d{2}:\d{2})"
)


def _parse_git_date(text: str) -> datetime | None:
    for offset in _KNOWN_OFFSETS:
        text = text.replace(f" {offset}", f"{offset[:3]}:{offset[3:]}")
    text = text.replace(" ", "T").upper()
    if not _RFC3339.fullmatch(text):
        return None
    try:
        return datetime.fromisoformat(text).astimezone(timezone.utc)
    except ValueError:
        return None


def parse_commit(record: str) -> Commit | None:
    """Parse one log record; return None if it is malformed."""
    parts = record.split("|", 6)
    if len(parts) < 6:
        return None

    hash_, parents, author, email, date_text, summary = parts[:6]
    date = _parse_git_date(date_text)
    if date is None:
        return None

    body = parts[6] if len(parts) > 6 else ""
    message = f"{summary}\n\n{body}" if body else summary

    return Commit(
        hash=hash_,
        short_hash=hash_[:7],
        message=message,
        summary=summary,
        author=author,
        email=email,
        date=date,
        parent_hashes=parents.split(" ") if parents else [],
    )


def parse_commits(output: str) -> list[Commit]:
    """Parse log output, one record per line, skipping malformed records."""
    records = (
        parse_commit(record)
        for record in output.rstrip().split("\n")
        if record.strip()
    )
    return [commit for commit in records if commit is not None]


def get_commits(repo_path: str | os.PathLike[str], max_count: int | None = None) -> list[Commit]:
    """Return commits from all refs, newest first, up to ``max_count``."""
    args = ["log", "--all", "--date=iso", f"--format={GIT_LOG_FORMAT}"]
    if max_count is not None:
        args.append(f"-n{max_count}")
    return parse_commits(run(args, repo_path))