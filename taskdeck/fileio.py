"""File helpers for the board and settings files."""

from __future__ import annotations

import fcntl
import json
import os
import tempfile
from pathlib import Path
from typing import Any

import yaml


def read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return ""


def read_json(path: Path) -> Any:
    """Parse a JSON file.

    Returns None when the file is missing or blank. Malformed content
    raises ``json.JSONDecodeError``; callers decide how to recover.
    """
    text = read_text(path)
    return json.loads(text) if text.strip() else None


def read_yaml(path: Path) -> dict[str, Any]:
    """Top-level mapping of a YAML file; {} for anything else."""
    data = yaml.safe_load(read_text(path))
    return data if isinstance(data, dict) else {}


def touch(path: Path) -> None:
    """Create an empty file (and its parent directory) if it does not exist."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.touch(exist_ok=True)


def replace_file(path: Path, content: str) -> None:
    """Swap *content* into *path* with a single rename.

    The text goes to a locked, fsynced sibling temp file first; if anything
    fails the temp file is removed and *path* keeps its old content.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = tempfile.NamedTemporaryFile(
        "w",
        encoding="utf-8",
        dir=path.parent,
        prefix=f".{path.name}.",
        suffix=".tmp",
        delete=False,
    )
    tmp_path = Path(tmp.name)
    try:
        with tmp:
            fcntl.flock(tmp, fcntl.LOCK_EX)
            tmp.write(content)
            tmp.flush()
            os.fsync(tmp.fileno())
        tmp_path.replace(path)
    except Exception:
        tmp_path.unlink(missing_ok=True)
        raise


def write_json_atomic(path: Path, data: Any) -> None:
    """Pretty-print *data* as JSON and replace *path* with it."""
    replace_file(path, json.dumps(data, indent=2, ensure_ascii=False) + "\n")
