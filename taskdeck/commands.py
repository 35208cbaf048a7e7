"""Discrete input commands consumed by the board."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Action(Enum):
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    CONFIRM = "confirm"
    CANCEL = "cancel"
    BACKSPACE = "backspace"
    NEWLINE_INSERT = "newline_insert"
    TEXT_CHAR = "text_char"
    OPEN_NEW = "open_new"
    OPEN_EDIT = "open_edit"
    OPEN_NEW_PROJECT = "open_new_project"
    OPEN_EDIT_PROJECT = "open_edit_project"
    OPEN_DELETE_ITEM = "open_delete_item"
    OPEN_DELETE_PROJECT = "open_delete_project"
    QUIT = "quit"


class Modifier(Enum):
    NONE = "none"
    CONTROL = "control"
    SHIFT = "shift"


DIRECTIONS = {
    Action.MOVE_UP: -1,
    Action.MOVE_DOWN: 1,
    Action.MOVE_LEFT: -1,
    Action.MOVE_RIGHT: 1,
}


@dataclass(frozen=True)
class Command:
    """One input command.

    ``char`` is set when the key that produced the command is printable, so
    an open text popup can take the letter instead (``n`` types "n" while
    editing, opens a popup otherwise).
    """

    action: Action
    modifier: Modifier = Modifier.NONE
    char: str | None = None

    @classmethod
    def text(cls, char: str) -> Command:
        return cls(Action.TEXT_CHAR, char=char)

    @property
    def is_vertical(self) -> bool:
        return self.action in (Action.MOVE_UP, Action.MOVE_DOWN)

    @property
    def is_horizontal(self) -> bool:
        return self.action in (Action.MOVE_LEFT, Action.MOVE_RIGHT)

    @property
    def step(self) -> int:
        return DIRECTIONS.get(self.action, 0)
