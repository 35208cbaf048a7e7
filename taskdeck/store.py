"""Project store: ordered kanban projects plus the selected one, and its JSON persistence."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from taskdeck.fileio import read_json, touch, write_json_atomic
from taskdeck.models import Column, Project
from taskdeck.workspace import kanban_path

logger = logging.getLogger(__name__)


@dataclass
class ProjectStore:
    projects: list[Project] = field(default_factory=list)
    selected_project: int = 0

    @classmethod
    def from_list(cls, data: Any) -> ProjectStore:
        """Build a store from the kanban.json array. Non-object entries are skipped."""
        if not isinstance(data, list):
            return cls()
        projects = [Project.from_dict(p) for p in data if isinstance(p, dict)]
        return cls(projects=projects)

    def to_list(self) -> list[dict[str, Any]]:
        return [p.to_dict() for p in self.projects]

    def __len__(self) -> int:
        return len(self.projects)

    @property
    def is_empty(self) -> bool:
        return not self.projects

    def current(self) -> Project | None:
        """The selected project, or None when the store is empty."""
        if not 0 <= self.selected_project < len(self.projects):
            return None
        return self.projects[self.selected_project]

    # ── Projects ──────────────────────────────────────────────

    def add_project(self, name: str) -> Project:
        project = Project(name=name)
        self.projects.append(project)
        logger.info("Added project %r", name)
        return project

    def rename_current(self, name: str) -> bool:
        project = self.current()
        if project is None:
            return False
        logger.info("Renamed project %r to %r", project.name, name)
        project.name = name
        return True

    def delete_current(self) -> Project | None:
        """Remove the selected project and repair selected_project.

        Deleting the last project selects the new last one (or 0 when the
        store is now empty); deleting any other keeps the index, which now
        points at the project that slid into its place.
        """
        project = self.current()
        if project is None:
            return None
        was_last = self.selected_project == len(self.projects) - 1
        self.projects.pop(self.selected_project)
        if was_last:
            self.selected_project = max(0, len(self.projects) - 1)
        logger.info("Deleted project %r", project.name)
        return project

    def select(self, step: int) -> bool:
        """Move selected_project by *step*, clamped. Returns False on an empty store."""
        if not self.projects:
            return False
        target = self.selected_project + step
        self.selected_project = min(max(target, 0), len(self.projects) - 1)
        return True

    # ── Items ─────────────────────────────────────────────────

    def add_item(self, column: Column, text: str) -> bool:
        project = self.current()
        if project is None:
            return False
        project.items(column).append(text)
        logger.debug("Added %r to %s of %r", text, column.key, project.name)
        return True

    def replace_item(self, column: Column, index: int | None, text: str) -> bool:
        project = self.current()
        if project is None or index is None:
            return False
        items = project.items(column)
        if not 0 <= index < len(items):
            return False
        items[index] = text
        return True


# ── Persistence ───────────────────────────────────────────────


def load_projects(root: Path | None = None) -> ProjectStore:
    """Load kanban.json.

    A missing file is created empty. An unreadable or malformed file yields
    an empty store instead of failing start-up.
    """
    path = kanban_path(root)
    if not path.exists():
        try:
            touch(path)
        except OSError as e:
            logger.warning("Could not create %s: %s", path, e)
        return ProjectStore()
    try:
        data = read_json(path)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.warning("Could not parse %s, starting with no projects: %s", path, e)
        return ProjectStore()
    if data is not None and not isinstance(data, list):
        logger.warning("%s does not hold a project list, starting with no projects", path)
    return ProjectStore.from_list(data)


def save_projects(store: ProjectStore, root: Path | None = None) -> None:
    """Overwrite kanban.json with the full project list."""
    write_json_atomic(kanban_path(root), store.to_list())
