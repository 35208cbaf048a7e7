"""Data directory, settings and clock helpers for TaskDeck."""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml

from taskdeck.fileio import read_yaml
from taskdeck.models import Settings

logger = logging.getLogger(__name__)

KANBAN_FILE = "kanban.json"
SETTINGS_FILE = "settings.yaml"
LOG_FILE = "taskdeck.log"


def data_root() -> Path:
    """Directory holding kanban.json and settings.yaml.

    TASKDECK_ROOT wins when set; otherwise the directory of the launched
    program, so the board file sits next to the executable.
    """
    env = os.environ.get("TASKDECK_ROOT")
    if env:
        return Path(env).expanduser().resolve()
    program = sys.argv[0] if sys.argv else ""
    if not program:
        return Path.cwd()
    return Path(program).expanduser().resolve().parent


# ── Path helpers ──────────────────────────────────────────────

def kanban_path(root: Path | None = None) -> Path:
    if root is None:
        root = data_root()
    return root / KANBAN_FILE


def settings_path(root: Path | None = None) -> Path:
    if root is None:
        root = data_root()
    return root / SETTINGS_FILE


def log_path(root: Path | None = None) -> Path:
    if root is None:
        root = data_root()
    return root / LOG_FILE


# ── Settings & clock ──────────────────────────────────────────

def load_settings(root: Path | None = None) -> Settings:
    """Load settings.yaml, falling back to defaults if missing or unparseable."""
    try:
        return Settings.from_dict(read_yaml(settings_path(root)))
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Ignoring unreadable settings file: %s", e)
        return Settings()


def get_user_timezone(settings: Settings | None = None) -> ZoneInfo:
    """Timezone from settings, defaulting to UTC when unset or unknown."""
    if settings is None:
        settings = load_settings()
    try:
        return ZoneInfo(settings.timezone)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown timezone %r, using UTC", settings.timezone)
        return ZoneInfo("UTC")


def now_local(settings: Settings | None = None) -> datetime:
    return datetime.now(get_user_timezone(settings))


def date_bar(settings: Settings, now: datetime | None = None) -> tuple[str, str, str]:
    """(date, weekday, time) strings for the header bar."""
    if now is None:
        now = now_local(settings)
    return (
        now.strftime(settings.date_format),
        now.strftime("%A"),
        now.strftime(settings.time_format),
    )
