"""Command-line interface."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from .branch import get_branches, get_current_branch
from .config import Config
from .diff import get_diff
from .errors import GitError
from .log import get_commits
from .models import RefType
from .remote import remote_list, remote_remove
from .smart_log import SmartLogFormatter
from .status import get_status
from .tag import create_tag, delete_tag, tag_list

VERSION = "0.1.0"
_THEMES = ("dark", "light")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with every subcommand."""
    parser = argparse.ArgumentParser(
        prog="openisl", description="Interactive Smart Log - Smart git operations"
    )
    parser.add_argument("--version", action="version", version=f"openisl {VERSION}")
    commands = parser.add_subparsers(dest="command", required=True)

    log = commands.add_parser("log", help="Show commit log")
    log.add_argument("--simple", action="store_true", help="Show as ASCII in terminal")
    log.add_argument("-b", "--branch", help="Show commits from specific branch")
    log.add_argument("--remote", action="store_true", help="Include remote branches")
    log.add_argument("-m", "--max-count", type=int, help="Maximum number of commits to show")

    commands.add_parser("tui", help="Launch interactive TUI for commit history")

    branch = commands.add_parser("branch", help="List, create, or delete branches")
    branch.add_argument("name", nargs="?", help="Create a new branch with this name")
    branch.add_argument("--remote", action="store_true", help="Show remote branches only")
    branch.add_argument("--all", action="store_true", help="Show all branches including remotes")

    checkout = commands.add_parser("checkout", help="Checkout a branch or commit")
    checkout.add_argument("target", help="Branch name or commit hash to checkout")

    commands.add_parser("status", help="Show working tree status")

    diff = commands.add_parser("diff", help="Show changes between commits")
    diff.add_argument("--staged", action="store_true", help="Show staged changes")
    diff.add_argument("commit", nargs="?", help="Show changes for specific commit")

    config = commands.add_parser("config", help="Configure openisl settings")
    config.add_argument("--show", action="store_true", help="Show current configuration")
    config.add_argument("--reset", action="store_true", help="Reset configuration to defaults")
    config.add_argument("--theme", help="Set theme (dark/light)")
    config.add_argument("--max-commits", type=int, help="Set max commits")

    remote = commands.add_parser("remote", help="Manage git remotes")
    remote.add_argument("--list", action="store_true", help="List all remotes")
    remote.add_argument("add", nargs="?", help="Add a remote")
    remote.add_argument("remove", nargs="?", help="Remove a remote")

    tag = commands.add_parser("tag", help="Manage git tags")
    tag.add_argument("--list", action="store_true", help="List all tags")
    tag.add_argument("create", nargs="?", help="Create a tag")
    tag.add_argument("--delete", help="Delete a tag")
    tag.add_argument("-m", "--message", help="Tag message for annotated tag")

    return parser


def _cmd_log(args: argparse.Namespace) -> None:
    commits = get_commits(Path.cwd(), args.max_count)
    if args.simple:
        print(SmartLogFormatter(commits, 80).format(), end="")
        return
    print(f"Commit Log ({len(commits)} commits):\n")
    for commit in commits:
        print(f"{commit.short_hash} - {commit.summary}")
        print(f"  Author: {commit.author} <{commit.email}>")
        print(f"  Date:   {commit.date:%Y-%m-%d %H:%M:%S} UTC\n")


def _cmd_tui(args: argparse.Namespace) -> None:
    print("Launching TUI... (Run 'openisl-tui' to use TUI)")


def _cmd_branch(args: argparse.Namespace) -> None:
    repo = Path.cwd()
    if args.name is not None:
        print(f"Creating branch: {args.name}")
        return

    branches = get_branches(repo)
    current = get_current_branch(repo)

    def wanted(ref_type: RefType) -> bool:
        if args.remote and not args.all:
            return ref_type is RefType.REMOTE
        if args.all:
            return True
        return ref_type is not RefType.REMOTE

    print("Branches:")
    for ref in branches:
        if wanted(ref.ref_type):
            prefix = "* " if ref.name == current else "  "
            print(f"{prefix}{ref.name}")


def _cmd_checkout(args: argparse.Namespace) -> None:
    print(f"Would checkout: {args.target}")


def _cmd_status(args: argparse.Namespace) -> None:
    files = get_status(Path.cwd())
    if not files:
        print("Working tree is clean")
        return
    print("Changes:")
    for file in files:
        print(f"{file.status.value}: {file.path}")


def _cmd_diff(args: argparse.Namespace) -> None:
    diff = get_diff(Path.cwd(), None, False)
    if diff:
        print(diff, end="")
    else:
        print("No changes")


def _cmd_config(args: argparse.Namespace) -> None:
    if args.reset:
        Config().save()
        print("Configuration reset to defaults.")
        return

    try:
        config = Config.load()
    except (ValueError, OSError):
        config = Config()

    if args.theme is not None:
        if args.theme in _THEMES:
            config.tui.theme = args.theme
            print(f"Theme set to: {args.theme}")
        else:
            print("Invalid theme. Use 'dark' or 'light'.")

    if args.max_commits is not None:
        if args.max_commits < 0:
            raise ValueError("max commits must not be negative")
        config.general.max_commits = args.max_commits
        print(f"Max commits set to: {args.max_commits}")

    if args.show or (args.theme is None and args.max_commits is None):
        print("Current Configuration:")
        print(f"  Theme: {config.tui.theme}")
        print(f"  Max Commits: {config.general.max_commits}")
        print(f"  Date Format: {config.general.date_format}")
        print(f"  Auto Fetch: {str(config.git.auto_fetch).lower()}")

    config.save()


def _cmd_remote(args: argparse.Namespace) -> None:
    repo = Path.cwd()
    if args.list:
        remotes = remote_list(repo)
        if not remotes:
            print("No remotes configured")
        for remote in remotes:
            print(f"{remote.name}  {remote.url} ({remote.fetch_type.strip()})")
    elif args.add is not None:
        print("Use 'openisl remote add <name> <url>' - URL argument needed")
    elif args.remove is not None:
        remote_remove(repo, args.remove)
        print(f"Removed remote '{args.remove}'")


def _cmd_tag(args: argparse.Namespace) -> None:
    repo = Path.cwd()
    if args.list:
        tags = tag_list(repo)
        if not tags:
            print("No tags found")
        for tag in tags:
            print(tag.name)
    elif args.create is not None:
        create_tag(repo, args.create, args.message, None)
        print(f"Created tag '{args.create}'")
    elif args.delete is not None:
        delete_tag(repo, args.delete)
        print(f"Deleted tag '{args.delete}'")


_HANDLERS: dict[str, Callable[[argparse.Namespace], None]] = {
    "log": _cmd_log,
    "tui": _cmd_tui,
    "branch": _cmd_branch,
    "checkout": _cmd_checkout,
    "status": _cmd_status,
    "diff": _cmd_diff,
    "config": _cmd_config,
    "remote": _cmd_remote,
    "tag": _cmd_tag,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; return the process exit status."""
    args = build_parser().parse_args(argv)
    try:
        _HANDLERS[args.command](args)
    except (GitError, OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        for note in getattr(exc, "__notes__", ()):
            print(f"  {note}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())