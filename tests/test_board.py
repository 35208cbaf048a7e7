"""Tests for taskdeck/board.py: command routing, popups and persistence."""

import json

from taskdeck.board import Board, Outcome
from taskdeck.commands import Action, Command, Modifier
from taskdeck.keys import command_from_key
from taskdeck.models import Column, Popup, Selection
from taskdeck.store import ProjectStore


def press(board: Board, *keys: str) -> Outcome:
    """Feed key names to the board; single characters are sent as typed text."""
    outcome = Outcome()
    for key in keys:
        character = key if len(key) == 1 else None
        command = command_from_key(key, character)
        assert command is not None, key
        outcome = board.handle(command)
    return outcome


def type_text(board: Board, text: str) -> None:
    press(board, *text)


# ── Navigation through the board ──────────────────────────────


def test_up_down_stay_in_column_bounds(board):
    press(board, "down", "down", "down", "down")
    assert board.selection.todo == 2
    press(board, "up", "up", "up", "up")
    assert board.selection.todo == 0


def test_down_on_empty_column_is_noop(board):
    press(board, "ctrl+up", "right")
    assert board.column is Column.IN_PROGRESS
    press(board, "down")
    assert board.selection.in_progress == 0
    assert board.project.in_progress == []


def test_left_right_change_focus(board):
    press(board, "right")
    assert board.column is Column.IN_PROGRESS
    assert board.selection == Selection(todo=None, in_progress=0, done=None)
    press(board, "right", "right")
    assert board.column is Column.DONE
    press(board, "left", "left", "left")
    assert board.column is Column.TODO
    assert board.selection.todo == 0


def test_ctrl_up_selects_next_project_and_resets(board):
    press(board, "right", "right")
    press(board, "ctrl+up")
    assert board.store.selected_project == 1
    assert board.column is Column.TODO
    assert board.selection == Selection(todo=0, in_progress=None, done=None)
    press(board, "ctrl+down")
    assert board.store.selected_project == 0


def test_ctrl_down_on_first_project_still_resets(board):
    press(board, "right", "right")
    assert board.column is Column.DONE
    press(board, "ctrl+down")
    assert board.store.selected_project == 0
    assert board.column is Column.TODO
    assert board.selection == Selection(todo=0, in_progress=None, done=None)


def test_ctrl_left_right_do_nothing(board):
    press(board, "ctrl+right", "ctrl+left")
    assert board.column is Column.TODO
    assert board.store.selected_project == 0


def test_directional_keys_ignored_while_popup_open(board):
    press(board, "n")
    press(board, "down", "right", "ctrl+up", "shift+right")
    assert board.selection.todo == 0
    assert board.column is Column.TODO
    assert board.store.selected_project == 0
    assert board.project.todo == ["task 1", "task 2", "task 3"]


# ── Moves ─────────────────────────────────────────────────────


def test_shift_right_moves_and_saves(board, saved):
    outcome = press(board, "shift+right")
    assert outcome.dirty is True
    assert board.project.todo == ["task 2", "task 3"]
    assert board.project.in_progress == ["wip", "task 1"]
    assert board.selection.todo == 0
    assert saved[-1][0]["in_progress"] == ["wip", "task 1"]


def test_shift_left_from_done(board, saved):
    press(board, "right", "right", "shift+left")
    assert board.project.done == []
    assert board.project.in_progress == ["wip", "done task"]
    assert len(saved) == 1


def test_shift_move_from_empty_column_does_not_save(board, saved):
    press(board, "ctrl+up", "right")
    outcome = press(board, "shift+right")
    assert outcome.dirty is False
    assert saved == []


def test_shift_left_on_todo_is_noop(board, saved):
    outcome = press(board, "shift+left")
    assert outcome.dirty is False
    assert board.project.todo == ["task 1", "task 2", "task 3"]


# ── Add / edit / delete items ─────────────────────────────────


def test_add_item_to_empty_todo():
    board = Board(ProjectStore())
    press(board, "ctrl+n")
    type_text(board, "Home")
    press(board, "enter")
    press(board, "n")
    assert board.popup is Popup.ADD_TODO
    type_text(board, "buy milk")
    press(board, "enter")
    assert board.project.todo == ["buy milk"]
    assert board.selection.todo == 0
    assert board.popup is Popup.DISABLED


def test_add_with_empty_text_is_cancel(board, saved):
    press(board, "right", "n")
    assert board.popup is Popup.ADD_IN_PROGRESS
    outcome = press(board, "enter")
    assert outcome.dirty is False
    assert board.popup is Popup.DISABLED
    assert board.project.in_progress == ["wip"]
    assert saved == []


def test_letters_are_typed_while_editing(board):
    press(board, "n")
    type_text(board, "new queue")
    assert board.modal.text == "new queue"
    press(board, "enter")
    assert board.project.todo[-1] == "new queue"


def test_edit_item(board, saved):
    press(board, "down", "e")
    assert board.popup is Popup.EDIT_TODO
    assert board.modal.text == "task 2"
    press(board, "backspace")
    type_text(board, "two")
    press(board, "enter")
    assert board.project.todo[1] == "task two"
    assert len(saved) == 1


def test_edit_with_empty_text_keeps_old_value(board, saved):
    press(board, "e")
    for _ in "task 1":
        press(board, "backspace")
    assert board.modal.text == ""
    press(board, "enter")
    assert board.project.todo[0] == "task 1"
    assert saved == []


def test_edit_on_empty_column_does_not_open(board):
    press(board, "ctrl+up", "right", "e")
    assert board.popup is Popup.DISABLED


def test_delete_item_confirm(board, saved):
    press(board, "down", "down", "delete")
    assert board.popup is Popup.DELETE_TODO
    assert board.modal.text == "task 3"
    assert board.modal.buffer.editable is False
    press(board, "enter")
    assert board.project.todo == ["task 1", "task 2"]
    assert board.selection.todo == 1
    assert len(saved) == 1


def test_delete_item_escape_cancels(board, saved):
    press(board, "delete", "escape")
    assert board.popup is Popup.DISABLED
    assert board.project.todo == ["task 1", "task 2", "task 3"]
    assert saved == []


def test_q_cancels_delete_popup_instead_of_quitting(board):
    press(board, "delete")
    outcome = press(board, "q")
    assert outcome.quit is False
    assert board.popup is Popup.DISABLED


def test_delete_on_empty_column_does_not_open(board):
    press(board, "ctrl+up", "right", "delete")
    assert board.popup is Popup.DISABLED


def test_ctrl_enter_inserts_newline(board):
    press(board, "n")
    type_text(board, "a")
    press(board, "ctrl+enter")
    type_text(board, "b")
    press(board, "enter")
    assert board.project.todo[-1] == "a\nb"


# ── Projects ──────────────────────────────────────────────────


def test_add_project(board, saved):
    press(board, "ctrl+n")
    assert board.popup is Popup.ADD_PROJECT
    type_text(board, "Project C")
    press(board, "enter")
    assert [p.name for p in board.store.projects][-1] == "Project C"
    assert board.store.selected_project == 0
    assert saved[-1][-1]["name"] == "Project C"


def test_edit_project_name(board):
    press(board, "ctrl+e")
    assert board.popup is Popup.EDIT_PROJECT
    assert board.modal.text == "Project A"
    type_text(board, "!")
    press(board, "enter")
    assert board.project.name == "Project A!"


def test_delete_last_project_selects_previous(board):
    press(board, "ctrl+up", "ctrl+delete")
    assert board.popup is Popup.DELETE_PROJECT
    assert board.modal.text == "Project B"
    press(board, "enter")
    assert board.store.selected_project == 0
    assert board.project.name == "Project A"


def test_delete_only_project_then_commands_are_noops(single_project_board, saved):
    board = single_project_board
    press(board, "ctrl+delete", "enter")
    assert board.store.is_empty
    assert board.store.selected_project == 0
    assert saved == [[]]

    for key in ("n", "e", "delete", "ctrl+e", "ctrl+delete", "shift+right", "down", "ctrl+up"):
        outcome = press(board, key)
        assert outcome.dirty is False
        assert board.popup is Popup.DISABLED
    assert board.store.is_empty

    press(board, "ctrl+n")
    type_text(board, "Fresh")
    press(board, "enter")
    assert board.project.name == "Fresh"


def test_project_commands_need_a_project():
    board = Board(ProjectStore())
    press(board, "ctrl+e", "ctrl+delete", "n")
    assert board.popup is Popup.DISABLED


# ── Quit & invalid input ──────────────────────────────────────


def test_escape_quits_when_idle(board):
    assert press(board, "escape").quit is True
    assert press(board, "q").quit is True


def test_escape_in_popup_cancels(board):
    press(board, "n")
    outcome = press(board, "escape")
    assert outcome.quit is False
    assert board.popup is Popup.DISABLED


def test_text_and_editing_keys_ignored_when_idle(board, saved):
    for command in (
        Command.text("x"),
        Command(Action.BACKSPACE),
        Command(Action.NEWLINE_INSERT),
        Command(Action.CONFIRM),
        Command(Action.CANCEL),
    ):
        assert board.handle(command) == Outcome()
    assert saved == []


# ── Persistence ───────────────────────────────────────────────


def test_save_failure_is_reported_not_raised(store):
    calls = []

    def failing_save(s):
        calls.append(s)
        raise OSError("disk full")

    board = Board(store, save=failing_save)
    outcome = board.handle(Command(Action.MOVE_RIGHT, Modifier.SHIFT))
    assert outcome.dirty is True
    assert "disk full" in outcome.notice
    assert board.project.in_progress == ["wip", "task 1"]

    outcome = board.handle(Command(Action.MOVE_RIGHT, Modifier.SHIFT))
    assert len(calls) == 2


def test_board_load_writes_through_to_disk(workspace):
    board = Board.load(workspace)
    press(board, "shift+right")
    data = json.loads((workspace / "kanban.json").read_text(encoding="utf-8"))
    assert data[0]["todo"] == ["task 2", "task 3"]
    assert data[0]["in_progress"] == ["wip", "task 1"]
