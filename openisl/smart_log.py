"""Compact text rendering of a commit list."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .models import Commit, GitRef, RefType

_DEFAULT_SUMMARY_LIMIT = 50
_RESERVED_WIDTH = 50


@dataclass
class _GraphNode:
    commit: Commit
    is_main_branch: bool
    has_children: bool


def _display_name(ref: GitRef) -> str:
    for prefix in ("refs/heads/", "refs/remotes/"):
        if ref.name.startswith(prefix):
            return ref.name[len(prefix):]
    return ref.name


class SmartLogFormatter:
    """Render commits as a short graph-like log, one line per commit."""

    def __init__(self, commits: Iterable[Commit], width: int = 80) -> None:
        self.commits = list(commits)
        self.width = width

    def format(self) -> str:
        """Return the rendered log."""
        if not self.commits:
            return "No commits found"

        nodes = self._build_graph()
        parts = [f"Smart Log ({len(self.commits)} commits):\n\n"]
        parts.extend(
            self._format_node(node, index, len(nodes)) + "\n"
            for index, node in enumerate(nodes)
        )
        return "".join(parts)

    def _find_main_branch(self) -> str:
        for commit in self.commits:
            for ref in commit.refs:
                if ref.ref_type is RefType.HEAD:
                    return ref.name
        return "main"

    def _build_graph(self) -> list[_GraphNode]:
        main_branch = self._find_main_branch()
        main_names = {main_branch, "main", "master"}
        return [
            _GraphNode(
                commit=commit,
                is_main_branch=any(ref.name in main_names for ref in commit.refs),
                has_children=any(
                    commit.hash in other.parent_hashes for other in self.commits
                ),
            )
            for commit in self.commits
        ]

    def _summary_limit(self) -> int:
        if self.width > 0:
            return max(self.width - _RESERVED_WIDTH, 0)
        return _DEFAULT_SUMMARY_LIMIT

    def _format_node(self, node: _GraphNode, index: int, total: int) -> str:
        if index == 0 and total == 1:
            marker = "●"
        elif index == total - 1:
            marker = "○"
        elif node.has_children:
            marker = "│"
        else:
            marker = " "

        line = f"{marker} {node.commit.short_hash}"
        line += "*" if node.is_main_branch else " "
        line += " "

        names = [
            _display_name(ref)
            for ref in node.commit.refs
            if ref.ref_type is not RefType.REMOTE
        ]
        if names:
            line += f"[{', '.join(names)}] "

        limit = self._summary_limit()
        summary = node.commit.summary
        if len(summary) > limit:
            summary = summary[: max(limit - 3, 0)] + "..."
        return line + summary