"""Board: owns the kanban state and routes input commands to the engines.

A command is first offered to the open popup, if any. Otherwise it drives
navigation, column moves, or opens a popup. Every confirmed mutation marks
the board dirty, and a dirty board is saved before the command returns.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from taskdeck.commands import Action, Command, Modifier
from taskdeck.modal import ModalController
from taskdeck.models import PROJECT, Column, FocusState, Popup, Project, Selection
from taskdeck.navigation import (
    change_column_focus,
    move_within_column,
    reset_selection,
    switch_project,
)
from taskdeck.store import ProjectStore, load_projects, save_projects
from taskdeck.transitions import delete_selected, move_item, selected_item

logger = logging.getLogger(__name__)

SaveFn = Callable[[ProjectStore], None]


@dataclass
class Outcome:
    """Result of handling one command."""

    dirty: bool = False
    quit: bool = False
    notice: str | None = None


class Board:
    def __init__(self, store: ProjectStore | None = None, save: SaveFn | None = None) -> None:
        self.store = store if store is not None else ProjectStore()
        self.selection = Selection()
        self.focus = FocusState()
        self.modal = ModalController()
        self._save = save

    @classmethod
    def load(cls, root: Path | None = None) -> Board:
        """Board backed by kanban.json under *root*."""
        return cls(load_projects(root), save=functools.partial(save_projects, root=root))

    # ── Views ─────────────────────────────────────────────────

    @property
    def project(self) -> Project | None:
        return self.store.current()

    @property
    def column(self) -> Column:
        return self.focus.column

    @property
    def popup(self) -> Popup:
        return self.modal.popup

    def selected(self, column: Column | None = None) -> str | None:
        """Highlighted item text in *column* (default: the focused one)."""
        return selected_item(self.project, self.selection, column or self.column)

    # ── Dispatch ──────────────────────────────────────────────

    def handle(self, command: Command) -> Outcome:
        if self.modal.is_open:
            dirty = self._handle_popup(command)
        elif command.action is Action.QUIT:
            return Outcome(quit=True)
        else:
            dirty = self._handle_idle(command)

        outcome = Outcome(dirty=dirty)
        if dirty:
            outcome.notice = self.persist()
        return outcome

    def persist(self) -> str | None:
        """Save the store. Returns a user-facing notice if the write failed."""
        if self._save is None:
            return None
        try:
            self._save(self.store)
        except OSError as e:
            logger.error("Saving board failed: %s", e)
            return f"Could not save board: {e}"
        return None

    # ── Popup open ────────────────────────────────────────────

    def _handle_popup(self, command: Command) -> bool:
        if command.char is not None and self.modal.buffer.editable:
            self.modal.insert(command.char)
            return False

        action = command.action
        if action is Action.CONFIRM:
            return self._confirm()
        if action in (Action.CANCEL, Action.QUIT):
            self.modal.cancel()
        elif action is Action.BACKSPACE:
            self.modal.backspace()
        elif action is Action.NEWLINE_INSERT:
            self.modal.newline()
        return False

    def _confirm(self) -> bool:
        popup, text = self.modal.confirm()

        if popup.action == "delete":
            if popup.target == PROJECT:
                if self.store.delete_current() is None:
                    return False
                reset_selection(self.focus, self.selection)
                return True
            if popup.column is None:
                return False
            return delete_selected(self.project, self.selection, popup.column) is not None

        # Empty input on add/edit behaves like cancel.
        if not text:
            return False

        if popup.target == PROJECT:
            if popup.action == "add":
                self.store.add_project(text)
                return True
            return self.store.rename_current(text)

        column = popup.column
        if column is None:
            return False
        if popup.action == "add":
            return self.store.add_item(column, text)
        return self.store.replace_item(column, self.selection.get(column), text)

    # ── No popup ──────────────────────────────────────────────

    def _handle_idle(self, command: Command) -> bool:
        if command.is_vertical:
            self._move_vertical(command)
            return False
        if command.is_horizontal:
            return self._move_horizontal(command)

        action = command.action
        project = self.project
        column = self.column

        if action is Action.OPEN_NEW_PROJECT:
            self.modal.open(Popup.ADD_PROJECT)
        elif project is None:
            return False
        elif action is Action.OPEN_NEW:
            self.modal.open(Popup.for_target("add", column))
        elif action is Action.OPEN_EDIT:
            self._open_for_selected("edit")
        elif action is Action.OPEN_DELETE_ITEM:
            self._open_for_selected("delete")
        elif action is Action.OPEN_EDIT_PROJECT:
            self.modal.open(Popup.EDIT_PROJECT, project.name)
        elif action is Action.OPEN_DELETE_PROJECT:
            self.modal.open(Popup.DELETE_PROJECT, project.name)
        return False

    def _open_for_selected(self, action: str) -> None:
        text = self.selected()
        if text is not None:
            self.modal.open(Popup.for_target(action, self.column), text)

    def _move_vertical(self, command: Command) -> None:
        if command.modifier is Modifier.CONTROL:
            # Ctrl+Up walks forward through projects, Ctrl+Down back.
            switch_project(self.store, self.focus, self.selection, -command.step)
            return
        column = self.column
        length = len(self.project.items(column)) if self.project else 0
        self.selection.set(
            column, move_within_column(self.selection.get(column), length, command.step)
        )

    def _move_horizontal(self, command: Command) -> bool:
        if command.modifier is Modifier.CONTROL:
            # Tab switching is not wired up; the kanban tab is the only one.
            return False
        if command.modifier is Modifier.SHIFT:
            return move_item(self.project, self.selection, self.column, command.step)
        change_column_focus(self.focus, self.selection, command.step)
        return False
