# openisl

A smart log for git. `openisl` runs the `git` command-line tool and gives
you a compact commit view and short commands for status, diffs, branches,
tags, remotes and settings. The same operations can be used from Python.

## Requirements

- Python 3.11 or later
- `git` on your `PATH`

## Installation

```
pip install .
```

## Command line

Run the commands inside a git working tree:

```
openisl log --max-count 10      # commit log with author and date (UTC)
openisl log --simple            # compact smart-log view
openisl status                  # working tree status
openisl diff                    # unstaged changes of the working tree
openisl branch                  # local branches, the current one marked with *
openisl branch --all            # every branch git lists
openisl branch --remote         # remote branches only
openisl tag --list              # list tags
openisl tag v1.0                # create a lightweight tag
openisl tag v1.0 -m "Release"   # create an annotated tag
openisl tag --delete v1.0       # delete a tag
openisl remote --list           # list remotes
openisl remote old-origin       # remove the remote named old-origin
openisl config --show           # show settings
openisl config --theme light --max-commits 200
openisl config --reset          # restore default settings
```

`openisl --version` prints the version. When a git command fails, `openisl`
prints the error to standard error and exits with status 1.

### Settings

Settings are TOML with three tables:

```toml
[general]
max_commits = 100
date_format = "%Y-%m-%d %H:%M:%S UTC"
verbose = false

[tui]
theme = "dark"
page_size = 20
show_help_on_start = false

[git]
auto_fetch = false
fetch_remotes = false
```

They are saved to `config.toml` in the user configuration directory for
`openisl` (see `openisl.config.config_path()`). When loading, values are
merged from `openisl.toml` in the current directory, then from environment
variables such as `OPENISL_TUI_THEME=light`, then from the user file; every
field must end up set. `openisl config` falls back to the defaults if the
settings cannot be loaded, and writes the user file each time it runs.

## What it does not do

- There is no interactive screen: `openisl tui` only prints a message.
- `openisl checkout <target>` and `openisl branch <name>` only print what
  they would do; they do not switch or create anything. The library
  functions `openisl.checkout.checkout` and `openisl.branch.create_branch`
  do.
- `openisl remote <name>` given as the first positional argument only
  prints a hint; remotes are added with `openisl.remote.remote_add`.
- `openisl diff` always shows the unstaged diff; `--staged` and a commit
  argument are accepted but not used. `openisl log` accepts `--branch` and
  `--remote` but always lists commits from all refs.

## Library use

```python
from pathlib import Path

from openisl.log import get_commits
from openisl.smart_log import SmartLogFormatter
from openisl.status import get_status

repo = Path(".")
commits = get_commits(repo, 20)
print(SmartLogFormatter(commits, 80).format())

for entry in get_status(repo):
    print(entry.status.value, entry.path)
```

Modules:

- `openisl.command`: `run`, `run_success`, `run_raw`, `find_repo_root`,
  `is_git_repo`
- `openisl.models`: `Commit`, `GitRef`, `RefType`, with dict and JSON
  conversion for commits
- `openisl.vcs`: neutral types such as `Change`, `Ref` and `SyncState`,
  converting to and from the git models
- `openisl.log`: `get_commits`, `parse_commits`, `parse_commit`
- `openisl.status`: `get_status`, `parse_status`, `FileStatus`, `StatusType`
- `openisl.branch`: `get_branches`, `get_current_branch`, `create_branch`,
  `create_branch_from_commit`
- `openisl.checkout`: `checkout`, `checkout_commit`
- `openisl.commit`: `amend_commit`, `drop_commit`, `squash_commits`,
  `get_commit_message`, `tag_commit`, `cherry_pick_commit`, `revert_commit`
- `openisl.diff`: `get_diff`, `get_commit_diff`
- `openisl.remote`: `remote_list`, `remote_add`, `remote_remove`, `fetch`,
  `pull`, `push`
- `openisl.tag`: `tag_list`, `create_tag`, `delete_tag`, `show_tag`
- `openisl.stage`: staging and unstaging files, listing staged and unstaged
  files
- `openisl.stash`: `get_stash_list`, `stash_push`, `stash_pop`,
  `stash_apply`, `stash_drop`, `stash_show`
- `openisl.sync`: `get_sync_state`, ahead/behind counts against the
  upstream branch and whether there are conflicts
- `openisl.config`: `Config` and its sections

A git command that exits with a non-zero status raises
`openisl.errors.CommandFailedError`; `find_repo_root` outside any working
tree raises `openisl.errors.RepositoryNotFoundError`. Both derive from
`openisl.errors.GitError`. Operations add a note describing what failed to
the exception they raise.

## Running the tests

```
pip install ".[test]"
pytest
```