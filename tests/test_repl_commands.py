"""
Tests for the REPL command handlers.

Commands run through execute_command() against the shared repl_context,
with output captured from the shared rich console.
"""

import pytest

from taskboard.repl.main import execute_command, repl_context
from taskboard.repl.parser import parse_command
from taskboard.repl.display import console


@pytest.fixture
def run(session):
    """Run one REPL line against the test session and return its output."""
    repl_context.reset(session)

    def _run(line: str) -> str:
        with console.capture() as capture:
            execute_command(parse_command(line))
        return capture.get()

    yield _run
    repl_context.reset()


def feed_input(monkeypatch, *answers):
    answers = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))


# --- add / draft / commit ---

def test_add_shorthand_creates_task(run, session):
    output = run('add "Design Homepage" --desc "..." -p high')

    task = session.list()[0]
    assert (task.title, task.description, task.priority, task.status) == (
        "Design Homepage", "...", "high", "todo"
    )
    assert "Created task" in output
    assert not session.drafts.is_open


def test_add_with_bad_priority_reports_error(run, session):
    output = run("add Thing --priority urgent")
    assert "Invalid priority" in output
    assert session.list() == ()


def test_add_prompts_for_fields(run, session, monkeypatch):
    feed_input(monkeypatch, "Write docs", "User guide", "l")

    run("add")

    task = session.list()[0]
    assert (task.title, task.description, task.priority) == ("Write docs", "User guide", "low")


def test_add_prompt_with_blank_title_keeps_form(run, session, monkeypatch):
    feed_input(monkeypatch, "   ", "desc", "")

    output = run("add")

    assert "Task title required" in output
    assert session.list() == ()
    assert session.drafts.is_open


def test_add_prompt_cancelled_with_ctrl_d(run, session, monkeypatch):
    def raise_eof(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", raise_eof)

    output = run("add")

    assert "Cancelled" in output
    assert not session.drafts.is_open
    assert session.list() == ()


def test_add_prompt_bad_priority_keeps_answers(run, session, monkeypatch):
    feed_input(monkeypatch, "My title", "My desc", "urgent")

    output = run("add")

    assert "Invalid priority" in output
    assert session.list() == ()
    assert session.drafts.is_open
    assert session.drafts.draft.title == "My title"
    assert session.drafts.draft.description == "My desc"

    run("draft priority high")
    run("commit")
    task = session.list()[0]
    assert (task.title, task.description, task.priority) == ("My title", "My desc", "high")


def test_draft_then_commit(run, session):
    assert "Opened a new task form" in run("draft title Plan sprint")
    run("draft desc Pick stories")
    run("draft priority h")

    output = run("commit")

    task = session.list()[0]
    assert (task.title, task.description, task.priority) == ("Plan sprint", "Pick stories", "high")
    assert "Created task" in output


def test_draft_unknown_field(run, session):
    output = run("draft status done")
    assert "Unknown field" in output


def test_commit_without_form(run):
    assert "No task form open" in run("commit")


def test_commit_blank_title_keeps_form(run, session):
    run("draft desc only a description")
    output = run("commit")

    assert "Task title required" in output
    assert session.drafts.is_open
    assert session.drafts.draft.description == "only a description"


def test_cancel_discards_form(run, session):
    run("draft title Never mind")
    assert "Discarded" in run("cancel")
    assert not session.drafts.is_open
    assert "Nothing to cancel" in run("cancel")


# --- board / column / show ---

def test_board_renders_columns(run, session):
    session.create("Alpha")
    output = run("board")

    assert "To Do" in output
    assert "In Progress" in output
    assert "Done" in output
    assert "Alpha" in output


def test_empty_board(run):
    assert "(empty)" in run("ls")


def test_board_json(run, session):
    session.create("Alpha")
    output = run("board --json")
    assert '"title": "Alpha"' in output
    assert '"total": 1' in output


def test_column_lists_one_status(run, session):
    a = session.create("Alpha")
    session.create("Beta")
    session.move(a.id, "done")

    output = run("column done")

    assert "Alpha" in output
    assert "Beta" not in output
    assert "No tasks in In Progress" in run("column ip")


def test_column_bad_status(run):
    assert "Invalid status" in run("column archived")


def test_show_task(run, session):
    task = session.create("Alpha", "Some details")
    output = run(f"show {task.short_id}")
    assert "Some details" in output
    assert task.id in output


def test_show_unknown_id(run):
    assert "not found" in run("show ffff")


# --- mv / rm ---

def test_mv_moves_task(run, session):
    task = session.create("Alpha")

    output = run(f"mv {task.short_id} ip")

    assert session.store.get(task.id).status == "in-progress"
    assert "Moved" in output


def test_mv_several_ids(run, session):
    a = session.create("A")
    b = session.create("B")

    run(f'mv {a.short_id},{b.short_id} "In Progress"')

    assert [t.status for t in session.list()] == ["in-progress", "in-progress"]


def test_mv_to_same_column(run, session):
    task = session.create("Alpha")
    assert "already in To Do" in run(f"mv {task.short_id} todo")


def test_mv_ambiguous_prefix(run, session):
    session.create("A")
    session.create("B")
    assert "ambiguous" in run("mv 0000000 done")
    assert [t.status for t in session.list()] == ["todo", "todo"]


def test_mv_missing_args(run):
    assert "Task id and column required" in run("mv 1a2b")


def test_mv_repeated_id_moves_once(run, session):
    task = session.create("Alpha")

    output = run(f"mv {task.short_id},{task.short_id} done")

    assert output.count("Moved") == 1
    assert "already in" not in output


def test_rm_repeated_id_deletes_once(run, session):
    a = session.create("A")
    b = session.create("B")

    output = run(f"rm {a.short_id},{a.id}")

    assert output.count("Deleted") == 1
    assert session.list() == (b,)


def test_rm_deletes(run, session):
    a = session.create("A")
    b = session.create("B")

    output = run(f"rm {a.short_id}")

    assert session.list() == (b,)
    assert "Deleted" in output


# --- edit / save ---

def test_edit_then_save(run, session):
    task = session.create("Alpha", "", "low")

    run(f"edit {task.short_id}")
    assert session.editor.is_editing(task.id)
    assert repl_context.get_prompt() == f"taskboard:[edit {task.short_id}]> "

    output = run('save --title "Alpha v2" --priority high')

    updated = session.store.get(task.id)
    assert (updated.title, updated.priority) == ("Alpha v2", "high")
    assert "Saved" in output
    assert not session.editor.is_editing()
    assert repl_context.get_prompt() == "taskboard> "


def test_edit_with_flags_saves_at_once(run, session):
    task = session.create("Alpha")

    run(f"edit {task.short_id} --status done")

    assert session.store.get(task.id).status == "done"
    assert not session.editor.is_editing()


def test_edit_switches_task(run, session):
    a = session.create("A")
    b = session.create("B")

    run(f"edit {a.short_id}")
    output = run(f"edit {b.short_id}")

    assert "Switched from" in output
    assert session.editor.current == b.id


def test_save_blank_title_ignored(run, session):
    task = session.create("Alpha")
    run(f"edit {task.short_id}")

    output = run('save --title "  "')

    assert "Blank title ignored" in output
    assert session.store.get(task.id).title == "Alpha"


def test_edit_with_blank_title_reports_no_change(run, session):
    task = session.create("Alpha")

    output = run(f'edit {task.short_id} --title "   "')

    assert "Blank title ignored" in output
    assert "Nothing changed" in output
    assert "Updated" not in output
    assert session.store.get(task.id).title == "Alpha"


def test_edit_blank_title_with_other_change(run, session):
    task = session.create("Alpha", "", "low")

    output = run(f'edit {task.short_id} --title "" --priority high')

    assert "Blank title ignored" in output
    assert "Updated" in output
    updated = session.store.get(task.id)
    assert (updated.title, updated.priority) == ("Alpha", "high")


def test_save_same_values_reports_no_change(run, session):
    task = session.create("Alpha")
    run(f"edit {task.short_id}")

    output = run("save --title Alpha")

    assert "Nothing changed" in output
    assert "Saved" not in output


def test_save_without_edit(run):
    assert "Not editing any task" in run("save --title X")


def test_cancel_edit(run, session):
    task = session.create("Alpha")
    run(f"edit {task.short_id}")

    assert "Stopped editing" in run("cancel")
    assert session.store.get(task.id) == task


def test_prompt_shows_open_form(run):
    run("draft")
    assert repl_context.get_prompt() == "taskboard:[new task]> "


# --- system ---

def test_sample_and_stats(run, session):
    assert "Added 5 sample tasks" in run("sample")

    output = run("stats")
    assert "To Do: 2" in output
    assert "In Progress: 1" in output
    assert "Done: 2" in output


def test_help(run):
    assert "Available Commands" in run("help")


def test_unknown_command(run):
    assert "Unknown command" in run("frobnicate")


def test_exit_stops_loop(session):
    repl_context.reset(session)
    with console.capture():
        assert execute_command(parse_command("exit")) is False
        assert execute_command(parse_command("")) is True
