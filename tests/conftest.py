"""Shared test fixtures for TaskDeck tests."""

from __future__ import annotations

import json
import os
from pathlib import Path

import pytest
import yaml

from taskdeck.board import Board
from taskdeck.models import Project
from taskdeck.store import ProjectStore


PROJECTS = [
    {
        "name": "Project A",
        "todo": ["task 1", "task 2", "task 3"],
        "in_progress": ["wip"],
        "done": ["done task"],
    },
    {
        "name": "Project B",
        "todo": ["only todo"],
        "in_progress": [],
        "done": [],
    },
]


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Create a temporary data directory with a seeded kanban.json and settings."""
    root = tmp_path / "workspace"
    root.mkdir(parents=True)

    (root / "kanban.json").write_text(json.dumps(PROJECTS, indent=2), encoding="utf-8")

    settings = {
        "timezone": "Europe/Berlin",
        "date_format": "%Y-%m-%d",
        "log_level": "debug",
    }
    (root / "settings.yaml").write_text(
        yaml.dump(settings, default_flow_style=False), encoding="utf-8"
    )

    os.environ["TASKDECK_ROOT"] = str(root)
    yield root
    if "TASKDECK_ROOT" in os.environ:
        del os.environ["TASKDECK_ROOT"]


@pytest.fixture
def store() -> ProjectStore:
    return ProjectStore.from_list(json.loads(json.dumps(PROJECTS)))


@pytest.fixture
def saved() -> list[list[dict]]:
    """Snapshots handed to the board's save callback."""
    return []


@pytest.fixture
def board(store: ProjectStore, saved: list) -> Board:
    """Board over the seeded projects, recording every save instead of writing."""
    return Board(store, save=lambda s: saved.append(s.to_list()))


@pytest.fixture
def single_project_board(saved: list) -> Board:
    store = ProjectStore(projects=[Project(name="P", todo=["t1"])])
    return Board(store, save=lambda s: saved.append(s.to_list()))
