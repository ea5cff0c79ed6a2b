"""Backing-file IO and settings for tasklist."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import yaml

from .models import (
    DEFAULT_UTC_OFFSET_HOURS,
    Settings,
    Task,
    TaskStoreError,
    TaskValidationError,
)

DEFAULT_TASKS_FILE = "tasklist.json"
DEFAULT_CONFIG_FILE = "tasklist.yaml"
DEFAULT_COLOR = True


def default_config_path(tasks_file: Path) -> Path:
    return tasks_file.parent / DEFAULT_CONFIG_FILE


def load_tasks(path: Path) -> list[Task]:
    if not path.exists():
        return []
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise TaskStoreError(f"Unable to read task list at {path}: {exc}") from exc
    if not isinstance(payload, list):
        raise TaskStoreError(f"Invalid task list at {path}: expected a JSON array")

    tasks: list[Task] = []
    for position, record in enumerate(payload, start=1):
        if not isinstance(record, dict):
            raise TaskStoreError(f"Invalid task record #{position} in {path}: expected an object")
        try:
            tasks.append(Task.from_dict(record))
        except TaskValidationError as exc:
            raise TaskStoreError(f"Invalid task record #{position} in {path}: {exc}") from exc
    return tasks


def dump_tasks(tasks: list[Task]) -> str:
    return json.dumps([task.to_dict() for task in tasks], indent=2) + "\n"


def save_tasks(path: Path, tasks: list[Task]) -> None:
    try:
        path.write_text(dump_tasks(tasks), encoding="utf-8")
    except OSError as exc:
        raise TaskStoreError(f"Unable to write task list at {path}: {exc}") from exc


def read_config(path: Path, warn: Callable[[str], None] | None = None) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        payload = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError):
        if warn is not None:
            warn(f"Unable to parse config at {path}. Falling back to defaults.")
        return {}
    if not isinstance(payload, dict):
        if warn is not None:
            warn(f"Invalid config format at {path}. Falling back to defaults.")
        return {}
    return payload


def _resolve_bool(
    settings: dict[str, Any],
    key: str,
    default: bool,
    path: Path,
    warn: Callable[[str], None] | None,
) -> bool:
    value = settings.get(key)
    if value is None:
        return default
    if not isinstance(value, bool):
        if warn is not None:
            warn(f"Invalid settings.{key} in {path}. Using default '{default}'.")
        return default
    return value


def _resolve_offset(
    settings: dict[str, Any],
    path: Path,
    warn: Callable[[str], None] | None,
) -> int:
    value = settings.get("utc_offset_hours")
    if value is None:
        return DEFAULT_UTC_OFFSET_HOURS
    if isinstance(value, bool) or not isinstance(value, int) or not -23 <= value <= 23:
        if warn is not None:
            warn(
                f"Invalid settings.utc_offset_hours in {path}. "
                f"Using default '{DEFAULT_UTC_OFFSET_HOURS}'."
            )
        return DEFAULT_UTC_OFFSET_HOURS
    return value


def resolve_settings(path: Path, warn: Callable[[str], None] | None = None) -> Settings:
    data = read_config(path, warn=warn)
    supported_top_keys = {"settings"}
    for key in data.keys():
        if key not in supported_top_keys and warn is not None:
            warn(f"Unsupported config key '{key}' in {path}. Ignoring.")

    settings = data.get("settings", {})
    if not isinstance(settings, dict):
        if warn is not None:
            warn(f"Invalid settings section in {path}. Using defaults.")
        return Settings()

    supported_settings_keys = {"color", "utc_offset_hours"}
    for key in settings.keys():
        if key not in supported_settings_keys and warn is not None:
            warn(f"Unsupported settings key '{key}' in {path}. Ignoring.")

    return Settings(
        color=_resolve_bool(settings, "color", DEFAULT_COLOR, path, warn),
        utc_offset_hours=_resolve_offset(settings, path, warn),
    )
