from datetime import datetime, timezone

import pytest

from openisl import models
from openisl.vcs import (
    Change,
    ChangeCount,
    ChangePatch,
    ChangeSegment,
    HistoryEditAction,
    HistoryEditPlan,
    HistoryEditPlanEntry,
    Ref,
    RefType,
    SavedWork,
    SyncState,
)

DATE = datetime(2024, 1, 10, 12, 0, 0, tzinfo=timezone.utc)


def make_commit():
    return models.Commit(
        hash="abc123def456789",
        short_hash="abc123d",
        message="Initial commit\n\nBody",
        summary="Initial commit",
        author="Test",
        email="test@example.com",
        date=DATE,
        parent_hashes=["parent1", "parent2"],
        refs=[
            models.GitRef("main", models.RefType.BRANCH),
            models.GitRef("v1.0.0", models.RefType.TAG),
        ],
    )


@pytest.mark.parametrize("git_type", list(models.RefType))
def test_ref_type_round_trip(git_type):
    converted = RefType.from_git(git_type)
    assert converted.name == git_type.name
    assert converted.to_git() is git_type


def test_change_from_commit_copies_fields():
    commit = make_commit()
    change = Change.from_commit(commit)
    assert change.id == commit.hash
    assert change.short_id == commit.short_hash
    assert change.parent_ids == commit.parent_hashes
    assert [ref.name for ref in change.refs] == ["main", "v1.0.0"]
    assert change.refs[1].ref_type is RefType.TAG


def test_change_commit_round_trip():
    commit = make_commit()
    assert Change.from_commit(commit).to_commit() == commit


def test_change_display_matches_commit_display():
    commit = make_commit()
    assert str(Change.from_commit(commit)) == str(commit)


@pytest.mark.parametrize("ref_type", list(RefType))
def test_ref_round_trip(ref_type):
    ref = Ref("name", ref_type)
    assert Ref.from_git_ref(ref.to_git_ref()) == ref
    assert str(ref) == str(ref.to_git_ref())


def test_ref_display():
    assert str(Ref("v1.0.0", RefType.TAG)) == "tag: v1.0.0"
    assert str(Ref("HEAD", RefType.HEAD)) == "HEAD"


def test_sync_state_defaults():
    state = SyncState()
    assert state.remote_name is None
    assert state.local_unpushed is None
    assert state.remote_unpulled is None
    assert state.has_conflicts is False


def test_change_count_defaults():
    count = ChangeCount()
    assert (count.additions, count.deletions) == (0, 0)


def test_saved_work_defaults():
    work = SavedWork(id="stash@{0}", timestamp=DATE)
    assert work.message is None
    assert work.files_affected == []
    assert work.change_count == ChangeCount()


def test_history_edit_plan_keeps_order():
    entries = [
        HistoryEditPlanEntry("a", HistoryEditAction.KEEP),
        HistoryEditPlanEntry("b", HistoryEditAction.COMBINE, "merged"),
    ]
    plan = HistoryEditPlan(changes=entries)
    assert [entry.change_id for entry in plan.changes] == ["a", "b"]
    assert plan.changes[1].message == "merged"
    assert plan.changes[0].message is None


def test_history_edit_actions_distinct():
    entries = [HistoryEditPlanEntry(str(index), action) for index, action in enumerate(HistoryEditAction)]
    plan = HistoryEditPlan(changes=entries)
    assert len({entry.action for entry in plan.changes}) == 5
    assert [entry.change_id for entry in plan.changes] == ["0", "1", "2", "3", "4"]


def test_change_patch_segments():
    patch = ChangePatch("src/main.rs", [ChangeSegment.INCLUDE, ChangeSegment.EXCLUDE])
    assert patch.segments == [ChangeSegment.INCLUDE, ChangeSegment.EXCLUDE]
    assert ChangeSegment.INCLUDE != ChangeSegment.EXCLUDE