"""Transition engine: deletion with index repair and column-to-column moves."""

from __future__ import annotations

import logging

from taskdeck.models import Column, Project, Selection

logger = logging.getLogger(__name__)


def delete_with_reindex(items: list[str], index: int | None) -> int | None:
    """Remove items[index] and return the index to select afterwards.

    - empty list or no valid index: nothing removed, index returned as-is
    - list now empty: 0
    - removed the tail: the new last index
    - otherwise: unchanged, now pointing at the item that slid into place
    """
    if not items or index is None or not 0 <= index < len(items):
        return index
    was_tail = index == len(items) - 1
    items.pop(index)
    if not items:
        return 0
    if was_tail:
        return len(items) - 1
    return index


def selected_item(project: Project | None, selection: Selection, column: Column) -> str | None:
    """Text of the highlighted item in *column*, or None if nothing valid is highlighted."""
    if project is None:
        return None
    items = project.items(column)
    index = selection.get(column)
    if index is None or not 0 <= index < len(items):
        return None
    return items[index]


def delete_selected(project: Project | None, selection: Selection, column: Column) -> str | None:
    """Delete the highlighted item of *column*. Returns the removed text, or None."""
    text = selected_item(project, selection, column)
    if text is None:
        return None
    selection.set(column, delete_with_reindex(project.items(column), selection.get(column)))
    return text


def move_item(project: Project | None, selection: Selection, source: Column, step: int) -> bool:
    """Move the highlighted item of *source* to the end of the adjacent column.

    *step* is +1 (towards Done) or -1 (towards To Do); there is no direct
    To Do <-> Done move. The target column's index is left alone.
    """
    target = source.neighbour(step) if step in (-1, 1) else None
    if target is None:
        return False
    text = selected_item(project, selection, source)
    if text is None:
        return False
    project.items(target).append(text)
    delete_selected(project, selection, source)
    logger.debug("Moved %r from %s to %s", text, source.key, target.key)
    return True
