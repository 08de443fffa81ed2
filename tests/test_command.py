from pathlib import Path

import pytest

from openisl.command import find_repo_root, is_git_repo, run, run_raw, run_success
from openisl.errors import CommandFailedError, GitError, RepositoryNotFoundError


@pytest.fixture
def repo(tmp_path):
    root = tmp_path / "repo"
    root.mkdir()
    run(["init", "-q"], root)
    (root / "git" / "src").mkdir(parents=True)
    return root


def test_run_returns_stdout():
    assert run(["--version"]).startswith("git version")


def test_run_success_initialises_repository(tmp_path):
    run_success(["init", "-q"], tmp_path)
    assert (tmp_path / ".git").is_dir()


def test_run_raises_on_failure():
    with pytest.raises(CommandFailedError) as info:
        run(["definitely-not-a-git-command"])
    assert str(info.value).startswith("git command failed:")
    assert info.value.stderr


def test_run_success_raises_on_failure():
    with pytest.raises(GitError):
        run_success(["definitely-not-a-git-command"])


def test_run_raw_reports_status_without_raising():
    result = run_raw(["definitely-not-a-git-command"])
    assert result.returncode != 0
    ok = run_raw(["--version"])
    assert ok.returncode == 0
    assert ok.stdout.startswith(b"git version")


def test_run_uses_working_directory(repo):
    top = run(["rev-parse", "--show-toplevel"], repo / "git").strip()
    assert Path(top).resolve() == repo.resolve()


def test_is_git_repo_in_repo(repo):
    assert is_git_repo(repo) is True


def test_is_git_repo_in_subdirectory(repo):
    assert is_git_repo(repo / "git" / "src") is True


def test_find_repo_root_in_repo(repo):
    assert find_repo_root(repo) == repo.resolve()


def test_find_repo_root_from_subdirectory(repo):
    assert find_repo_root(repo / "git" / "src") == repo.resolve()


def test_is_git_repo_non_git_dir(tmp_path):
    plain = tmp_path / "plain"
    plain.mkdir()
    assert is_git_repo(plain) is False


def test_find_repo_root_non_git_dir(tmp_path):
    plain = tmp_path / "plain"
    plain.mkdir()
    with pytest.raises(RepositoryNotFoundError):
        find_repo_root(plain)


def test_find_repo_root_missing_path(tmp_path):
    with pytest.raises(OSError):
        find_repo_root(tmp_path / "does-not-exist")


def test_is_git_repo_relative_path(repo, monkeypatch):
    monkeypatch.chdir(repo)
    assert is_git_repo(Path("git")) is True


def test_is_git_repo_relative_path_outside_repo(tmp_path, monkeypatch):
    plain = tmp_path / "plain"
    plain.mkdir()
    monkeypatch.chdir(plain)
    assert is_git_repo(Path("missing")) is False