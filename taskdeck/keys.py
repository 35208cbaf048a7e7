"""Translate terminal key names (as Textual reports them) into board commands."""

from __future__ import annotations

from taskdeck.commands import Action, Command, Modifier

KEYMAP: dict[str, Command] = {
    "up": Command(Action.MOVE_UP),
    "down": Command(Action.MOVE_DOWN),
    "left": Command(Action.MOVE_LEFT),
    "right": Command(Action.MOVE_RIGHT),
    "ctrl+up": Command(Action.MOVE_UP, Modifier.CONTROL),
    "ctrl+down": Command(Action.MOVE_DOWN, Modifier.CONTROL),
    "ctrl+left": Command(Action.MOVE_LEFT, Modifier.CONTROL),
    "ctrl+right": Command(Action.MOVE_RIGHT, Modifier.CONTROL),
    "shift+up": Command(Action.MOVE_UP, Modifier.SHIFT),
    "shift+down": Command(Action.MOVE_DOWN, Modifier.SHIFT),
    "shift+left": Command(Action.MOVE_LEFT, Modifier.SHIFT),
    "shift+right": Command(Action.MOVE_RIGHT, Modifier.SHIFT),
    "enter": Command(Action.CONFIRM),
    "ctrl+enter": Command(Action.NEWLINE_INSERT),
    "ctrl+j": Command(Action.NEWLINE_INSERT),
    # Escape quits when idle; the board turns it into cancel while a popup is open.
    "escape": Command(Action.QUIT),
    "backspace": Command(Action.BACKSPACE),
    "ctrl+h": Command(Action.BACKSPACE),
    "delete": Command(Action.OPEN_DELETE_ITEM),
    "ctrl+delete": Command(Action.OPEN_DELETE_PROJECT),
    "ctrl+n": Command(Action.OPEN_NEW_PROJECT),
    "ctrl+e": Command(Action.OPEN_EDIT_PROJECT),
}

LETTER_ACTIONS: dict[str, Action] = {
    "n": Action.OPEN_NEW,
    "e": Action.OPEN_EDIT,
    "q": Action.QUIT,
}

KEY_HINTS = [
    ("←→", "column"),
    ("↑↓", "item"),
    ("shift+←→", "move"),
    ("ctrl+↑↓", "project"),
    ("n/e/del", "new/edit/delete"),
    ("ctrl+n/e/del", "project"),
    ("esc", "quit"),
]


def command_from_key(key: str, character: str | None = None) -> Command | None:
    """Command for a key press, or None if the key means nothing to the board."""
    command = KEYMAP.get(key)
    if command is not None:
        return command
    if not character or len(character) != 1 or not character.isprintable():
        return None
    return Command(LETTER_ACTIONS.get(character, Action.TEXT_CHAR), char=character)
