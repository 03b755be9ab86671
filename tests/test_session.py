"""
Tests for BoardSession: snapshots, listeners, id lookups and sample data.
"""

import json

import pytest

from taskboard.core.exceptions import InvalidInputError, TaskNotFoundError
from taskboard.core.models import COLUMNS, DraftPatch, TaskPatch
from taskboard.core.session import BoardSession, SAMPLE_TASKS


# --- snapshots ---

def test_fresh_session_is_empty():
    session = BoardSession()
    snapshot = session.snapshot()

    assert snapshot.total == 0
    assert snapshot.counts == {"todo": 0, "in-progress": 0, "done": 0}
    assert session.columns == COLUMNS


def test_snapshot_reflects_mutations(session):
    task = session.create("Design Homepage", "...", "high")
    session.move(task.id, "done")

    snapshot = session.snapshot()

    assert snapshot.counts == {"todo": 0, "in-progress": 0, "done": 1}
    assert snapshot.column("done")[0].id == task.id
    assert snapshot.column("todo") == ()


def test_snapshot_to_json(session):
    session.create("A", "", "low")
    data = json.loads(session.snapshot().to_json())

    assert [c["status"] for c in data["columns"]] == ["todo", "in-progress", "done"]
    assert [c["title"] for c in data["columns"]] == ["To Do", "In Progress", "Done"]
    assert data["columns"][0]["count"] == 1
    assert data["columns"][0]["tasks"][0]["title"] == "A"
    assert data["total"] == 1


# --- listeners ---

def test_listener_sees_each_change(session):
    received = []
    session.subscribe(received.append)

    task = session.create("A")
    session.move(task.id, "in-progress")
    session.update(task.id, TaskPatch(title="A2"))
    session.delete(task.id)

    assert [s.total for s in received] == [1, 1, 1, 0]
    assert received[1].counts["in-progress"] == 1
    assert received[2].tasks[0].title == "A2"


def test_listener_not_called_for_noops(session):
    received = []
    session.subscribe(received.append)
    task = session.create("A")
    received.clear()

    session.create("   ")
    session.delete("missing")
    session.move(task.id, "todo")
    session.update("missing", TaskPatch(title="B"))
    session.commit_draft()

    assert received == []


def test_unsubscribe_stops_notifications(session):
    received = []
    session.subscribe(received.append)
    session.subscribe(received.append)
    session.unsubscribe(received.append)

    session.create("A")

    assert received == []


# --- draft and edit through the session ---

def test_draft_commit_notifies(session):
    received = []
    session.subscribe(received.append)

    session.begin_draft()
    session.set_draft_field("title", "From form")
    session.apply_draft(DraftPatch(priority="high"))
    task = session.commit_draft()

    assert task.title == "From form"
    assert task.priority == "high"
    assert len(received) == 1


def test_cancel_draft(session):
    session.begin_draft()
    session.set_draft_field("title", "Gone")
    session.cancel_draft()

    assert not session.drafts.is_open
    assert session.list() == ()


def test_edit_round_trip(session):
    task = session.create("A")
    session.begin_edit(task.id)

    saved = session.save_edit(TaskPatch(description="details"))

    assert saved.description == "details"
    assert not session.editor.is_editing()


def test_cancel_edit(session):
    task = session.create("A")
    session.begin_edit(task.id)
    session.cancel_edit()
    assert session.editor.current is None


def test_deleting_edited_task_clears_selection(session):
    task = session.create("A")
    other = session.create("B")
    session.begin_edit(task.id)

    session.delete(other.id)
    assert session.editor.is_editing(task.id)

    session.delete(task.id)
    assert session.editor.current is None


# --- id lookups ---

def test_resolve_short_id(session):
    task = session.create("A")
    assert session.resolve_or_raise(task.short_id) == task


def test_resolve_unknown_raises(session):
    session.create("A")
    with pytest.raises(TaskNotFoundError):
        session.resolve_or_raise("ffff")


def test_resolve_ambiguous_raises(session):
    session.create("A")
    session.create("B")
    with pytest.raises(InvalidInputError, match="ambiguous"):
        session.resolve_or_raise("0000000")


# --- sample data ---

def test_seed_sample_tasks(session):
    created = session.seed_sample_tasks()
    snapshot = session.snapshot()

    assert len(created) == len(SAMPLE_TASKS)
    assert [t.title for t in snapshot.tasks] == [s[0] for s in SAMPLE_TASKS]
    assert snapshot.counts == {"todo": 2, "in-progress": 1, "done": 2}


def test_seed_notifies_once(session):
    received = []
    session.subscribe(received.append)

    session.seed_sample_tasks()

    assert len(received) == 1
    assert received[0].total == len(SAMPLE_TASKS)
