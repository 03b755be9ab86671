"""
Tests for the new-task draft form.

Covers:
- begin/set_field/commit lifecycle
- Blank titles keep the form open and the store untouched
- cancel throws the form away
"""

import pytest

from taskboard.core.draft import DraftBuffer, DraftState
from taskboard.core.exceptions import InvalidInputError
from taskboard.core.models import Draft, DraftPatch


@pytest.fixture
def drafts(store):
    return DraftBuffer(store)


def test_starts_closed(drafts):
    assert drafts.state is DraftState.CLOSED
    assert not drafts.is_open
    assert drafts.draft == Draft()


def test_begin_resets_fields(drafts):
    drafts.begin()
    drafts.set_field("title", "Half typed")

    drafts.begin()

    assert drafts.is_open
    assert drafts.draft == Draft(title="", description="", priority="medium")


def test_set_field_updates_one_field(drafts):
    drafts.begin()
    drafts.set_field("title", "Write docs")
    drafts.set_field("priority", "high")

    assert drafts.draft.title == "Write docs"
    assert drafts.draft.description == ""
    assert drafts.draft.priority == "high"


def test_set_field_rejects_unknown_field(drafts):
    drafts.begin()
    with pytest.raises(InvalidInputError):
        drafts.set_field("status", "done")


def test_apply_opens_closed_form(drafts):
    drafts.apply(DraftPatch(title="Quick add"))
    assert drafts.is_open
    assert drafts.draft.title == "Quick add"


def test_commit_creates_task_and_resets(drafts, store):
    drafts.begin()
    drafts.apply(DraftPatch(title="Ship it", description="today", priority="low"))

    task = drafts.commit()

    assert task is not None
    assert store.list() == (task,)
    assert (task.title, task.description, task.priority, task.status) == (
        "Ship it", "today", "low", "todo"
    )
    assert drafts.state is DraftState.CLOSED
    assert drafts.draft == Draft()


@pytest.mark.parametrize("title", ["", "   "])
def test_commit_with_blank_title_keeps_form_open(drafts, store, title):
    drafts.begin()
    drafts.apply(DraftPatch(title=title, description="kept"))

    assert drafts.commit() is None
    assert len(store) == 0
    assert drafts.is_open
    assert drafts.draft.description == "kept"


def test_commit_with_unknown_priority_keeps_form_open(drafts, store):
    drafts.begin()
    drafts.apply(DraftPatch(title="Title", priority="urgent"))

    assert drafts.commit() is None
    assert len(store) == 0
    assert drafts.state is DraftState.EDITING


def test_commit_when_closed_is_noop(drafts, store):
    assert drafts.commit() is None
    assert len(store) == 0


def test_cancel_discards_without_creating(drafts, store):
    drafts.begin()
    drafts.set_field("title", "Never mind")

    drafts.cancel()

    assert drafts.state is DraftState.CLOSED
    assert drafts.draft == Draft()
    assert len(store) == 0
