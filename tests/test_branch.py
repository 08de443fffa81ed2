import subprocess

import pytest

from openisl.branch import (
    create_branch,
    create_branch_from_commit,
    get_branches,
    get_current_branch,
    parse_branches,
)
from openisl.errors import CommandFailedError
from openisl.models import RefType


def _git(repo, *args):
    return subprocess.run(
        ["git", *args], cwd=repo, check=True, capture_output=True, text=True
    ).stdout


def _commit(repo, name, content, message):
    (repo / name).write_text(content)
    _git(repo, "add", name)
    _git(repo, "commit", "-m", message)
    return _git(repo, "rev-parse", "HEAD").strip()


@pytest.fixture
def repo(tmp_path):
    _git(tmp_path, "init")
    _git(tmp_path, "symbolic-ref", "HEAD", "refs/heads/main")
    _git(tmp_path, "config", "user.email", "test@example.com")
    _git(tmp_path, "config", "user.name", "Test User")
    _git(tmp_path, "config", "commit.gpgsign", "false")
    _commit(tmp_path, "test.txt", "test", "Initial commit")
    return tmp_path


def test_parse_branches_plain_names_are_branches():
    refs = parse_branches("main|main\nfeature/x|feature/x\n")
    assert [r.name for r in refs] == ["main", "feature/x"]
    assert all(r.ref_type is RefType.BRANCH for r in refs)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("refs/heads/main", RefType.BRANCH),
        ("refs/remotes/origin/main", RefType.REMOTE),
        ("refs/tags/v1", RefType.TAG),
        ("HEAD", RefType.HEAD),
        ("topic", RefType.BRANCH),
    ],
)
def test_parse_branches_ref_types(name, expected):
    refs = parse_branches(f"{name}|{name}")
    assert refs[0].name == name
    assert refs[0].ref_type is expected


def test_parse_branches_skips_blank_lines():
    assert parse_branches("\n   \nmain|main\n\n") == parse_branches("main|main")
    assert len(parse_branches("\n  \n")) == 0


def test_get_branches_returns_refs(repo):
    branches = get_branches(repo)
    assert [b.name for b in branches] == ["main"]
    assert all(b.name for b in branches)


def test_get_current_branch_returns_branch_name(repo):
    assert get_current_branch(repo) == "main"


def test_get_current_branch_detached_is_none(repo):
    head = _git(repo, "rev-parse", "HEAD").strip()
    _git(repo, "checkout", head)
    assert get_current_branch(repo) is None


def test_create_branch_adds_branch_without_switching(repo):
    create_branch(repo, "feature/new")
    names = sorted(b.name for b in get_branches(repo))
    assert names == ["feature/new", "main"]
    assert get_current_branch(repo) == "main"


def test_create_branch_twice_fails(repo):
    create_branch(repo, "dup")
    with pytest.raises(CommandFailedError) as info:
        create_branch(repo, "dup")
    assert "Failed to create branch 'dup'" in info.value.__notes__


def test_create_branch_from_commit_switches(repo):
    first = _git(repo, "rev-parse", "HEAD").strip()
    _commit(repo, "other.txt", "x", "Second commit")
    create_branch_from_commit(repo, "old", first)
    assert get_current_branch(repo) == "old"
    assert _git(repo, "rev-parse", "HEAD").strip() == first


def test_get_branches_outside_repo_fails(tmp_path):
    with pytest.raises(CommandFailedError):
        get_branches(tmp_path)