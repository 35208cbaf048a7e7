"""Navigation engine: selection moves, column focus and project switching.

The functions update the passed Selection/FocusState in place and report
whether anything changed. None of them touch project contents.
"""

from __future__ import annotations

from taskdeck.models import Column, FocusState, Selection, Tab
from taskdeck.store import ProjectStore


def move_within_column(index: int | None, length: int, step: int) -> int | None:
    """Next index after moving *step* rows in a column of *length* items.

    Clamped to [0, length-1]. An empty column keeps its index; an unset
    index on a non-empty column lands on the first item.
    """
    if length <= 0:
        return index
    if index is None:
        return 0
    return min(max(index + step, 0), length - 1)


def change_column_focus(focus: FocusState, selection: Selection, step: int) -> bool:
    """Shift kanban focus one column left or right (no wraparound).

    The column gaining focus is highlighted from its first item and the
    column losing focus is cleared.
    """
    if focus.active_tab is not Tab.KANBAN:
        # Only the kanban tab has columns to move between.
        return False
    current = focus.column
    target = current.neighbour(step)
    if target is None:
        return False
    selection.set(target, 0)
    selection.set(current, None)
    focus.column = target
    return True


def reset_selection(focus: FocusState, selection: Selection) -> None:
    """Project-switch reset: focus To Do, highlight its first item, clear the rest."""
    focus.column = Column.TODO
    selection.todo = 0
    selection.in_progress = None
    selection.done = None


def switch_project(store: ProjectStore, focus: FocusState, selection: Selection, step: int) -> bool:
    """Select the project *step* positions away and reset the board selection."""
    if focus.active_tab is not Tab.KANBAN or not store.select(step):
        return False
    reset_selection(focus, selection)
    return True
