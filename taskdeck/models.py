"""Typed models for the TaskDeck board.

Persisted models use from_dict/to_dict for JSON/YAML serialization.
Unknown keys are ignored; missing keys use defaults.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum
from typing import Any


# ── Columns & tabs ────────────────────────────────────────────


class Column(Enum):
    """One of the three kanban lists, valued by its left-to-right position."""

    TODO = 0
    IN_PROGRESS = 1
    DONE = 2

    @property
    def key(self) -> str:
        """Field name used in kanban.json."""
        return _COLUMN_KEYS[self]

    @property
    def title(self) -> str:
        return _COLUMN_TITLES[self]

    def neighbour(self, step: int) -> Column | None:
        """Column *step* positions to the right (negative: left), or None past the edge."""
        pos = self.value + step
        if 0 <= pos < len(Column):
            return Column(pos)
        return None


_COLUMN_KEYS = {
    Column.TODO: "todo",
    Column.IN_PROGRESS: "in_progress",
    Column.DONE: "done",
}

_COLUMN_TITLES = {
    Column.TODO: "ToDo",
    Column.IN_PROGRESS: "In Progress",
    Column.DONE: "Done",
}


class Tab(Enum):
    DAILY_TASKS = 1
    EVENTS = 2
    KANBAN = 3


TAB_TITLES = {
    Tab.DAILY_TASKS: "Daily Tasks",
    Tab.EVENTS: "Events",
    Tab.KANBAN: "Kanban",
}


# ── Popups ────────────────────────────────────────────────────


PROJECT = "project"
DAILY_TASK = "daily_task"


class Popup(Enum):
    """Modal popup states. Each open state names its action and the entity it targets."""

    DISABLED = (None, None)
    ADD_PROJECT = ("add", PROJECT)
    EDIT_PROJECT = ("edit", PROJECT)
    DELETE_PROJECT = ("delete", PROJECT)
    ADD_TODO = ("add", Column.TODO)
    EDIT_TODO = ("edit", Column.TODO)
    DELETE_TODO = ("delete", Column.TODO)
    ADD_IN_PROGRESS = ("add", Column.IN_PROGRESS)
    EDIT_IN_PROGRESS = ("edit", Column.IN_PROGRESS)
    DELETE_IN_PROGRESS = ("delete", Column.IN_PROGRESS)
    ADD_DONE = ("add", Column.DONE)
    EDIT_DONE = ("edit", Column.DONE)
    DELETE_DONE = ("delete", Column.DONE)
    # Daily-task tab; declared for completeness, nothing opens these yet.
    ADD_TASK = ("add", DAILY_TASK)
    EDIT_TASK = ("edit", DAILY_TASK)
    DELETE_TASK = ("delete", DAILY_TASK)

    def __init__(self, action: str | None, target: Column | str | None) -> None:
        self.action = action
        self.target = target

    @classmethod
    def for_target(cls, action: str, target: Column | str) -> Popup:
        for popup in cls:
            if popup.action == action and popup.target == target:
                return popup
        raise ValueError(f"No popup for {action!r} on {target!r}")

    @property
    def is_open(self) -> bool:
        return self is not Popup.DISABLED

    @property
    def editable(self) -> bool:
        """Add and edit popups take text input; delete popups only confirm."""
        return self.action in ("add", "edit")

    @property
    def column(self) -> Column | None:
        return self.target if isinstance(self.target, Column) else None

    @property
    def title(self) -> str:
        return _POPUP_TITLES.get(self, "")


_POPUP_TITLES = {
    Popup.ADD_PROJECT: "Add a New Project",
    Popup.EDIT_PROJECT: "Edit Project Name",
    Popup.DELETE_PROJECT: "Delete Current Project?",
    Popup.ADD_TODO: "Add a New Todo Task",
    Popup.EDIT_TODO: "Edit Todo Task's Name",
    Popup.DELETE_TODO: "Delete Todo?",
    Popup.ADD_IN_PROGRESS: "Add a New In Progress Task",
    Popup.EDIT_IN_PROGRESS: "Edit In Progress Task's Name",
    Popup.DELETE_IN_PROGRESS: "Delete In Progress?",
    Popup.ADD_DONE: "Add a New Done Task",
    Popup.EDIT_DONE: "Edit Done Task's Name",
    Popup.DELETE_DONE: "Delete Done?",
    Popup.ADD_TASK: "Add a New Task",
    Popup.EDIT_TASK: "Edit Task's Name",
    Popup.DELETE_TASK: "Delete Task?",
}


# ── Kanban ────────────────────────────────────────────────────


def _str_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [str(v) for v in value]


@dataclass
class Project:
    name: str = ""
    todo: list[str] = field(default_factory=list)
    in_progress: list[str] = field(default_factory=list)
    done: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Project:
        return cls(
            name=str(d.get("name", "")),
            todo=_str_list(d.get("todo")),
            in_progress=_str_list(d.get("in_progress")),
            done=_str_list(d.get("done")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "todo": list(self.todo),
            "in_progress": list(self.in_progress),
            "done": list(self.done),
        }

    def items(self, column: Column) -> list[str]:
        """The live list backing *column* (mutations apply to the project)."""
        return getattr(self, column.key)


@dataclass
class Selection:
    """Per-column highlighted index; None means nothing highlighted in that column."""

    todo: int | None = 0
    in_progress: int | None = None
    done: int | None = None

    def get(self, column: Column) -> int | None:
        return getattr(self, column.key)

    def set(self, column: Column, index: int | None) -> None:
        setattr(self, column.key, index)


@dataclass
class FocusState:
    active_tab: Tab = Tab.KANBAN
    column_focus: dict[Tab, int] = field(default_factory=lambda: {t: 0 for t in Tab})

    @property
    def column(self) -> Column:
        """Focused kanban column."""
        return Column(self.column_focus[Tab.KANBAN])

    @column.setter
    def column(self, value: Column) -> None:
        self.column_focus[Tab.KANBAN] = value.value


@dataclass
class InputBuffer:
    text: str = ""
    editable: bool = False

    def clear(self) -> None:
        self.text = ""
        self.editable = False


# ── Daily tasks (data only) ───────────────────────────────────


def _seconds(value: Any) -> timedelta:
    try:
        return timedelta(seconds=max(0, int(value)))
    except (TypeError, ValueError):
        return timedelta(0)


@dataclass
class TaskStep:
    step_name: str = ""
    step_duration: timedelta = field(default_factory=timedelta)

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> TaskStep:
        return cls(
            step_name=str(d.get("step_name", "")),
            step_duration=_seconds(d.get("step_duration", 0)),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "step_name": self.step_name,
            "step_duration": int(self.step_duration.total_seconds()),
        }


@dataclass
class DailyTask:
    task_name: str = ""
    steps: list[TaskStep] = field(default_factory=list)
    task_duration: timedelta = field(default_factory=timedelta)

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> DailyTask:
        steps = [TaskStep.from_dict(s) for s in (d.get("steps") or []) if isinstance(s, dict)]
        return cls(
            task_name=str(d.get("task_name", "")),
            steps=steps,
            task_duration=_seconds(d.get("task_duration", 0)),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "task_name": self.task_name,
            "steps": [s.to_dict() for s in self.steps],
            "task_duration": int(self.task_duration.total_seconds()),
        }

    def add_step(self, step: TaskStep) -> None:
        self.steps.append(step)


# ── Settings ──────────────────────────────────────────────────


LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class Settings:
    timezone: str = "UTC"
    date_format: str = "%d-%m-%Y"
    time_format: str = "%H:%M"
    log_level: str = "WARNING"

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Settings:
        if not d or not isinstance(d, dict):
            return cls()
        level = str(d.get("log_level", "WARNING")).strip().upper()
        if level not in LOG_LEVELS:
            level = "WARNING"
        return cls(
            timezone=str(d.get("timezone", "UTC")),
            date_format=str(d.get("date_format", "%d-%m-%Y")),
            time_format=str(d.get("time_format", "%H:%M")),
            log_level=level,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "timezone": self.timezone,
            "date_format": self.date_format,
            "time_format": self.time_format,
            "log_level": self.log_level,
        }
