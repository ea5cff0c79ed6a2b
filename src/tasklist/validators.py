"""Pure parsers for raw console input.

Each parser turns one line of user input into a typed value or raises
``TaskValidationError`` carrying the console message to show before the
caller prompts again.
"""

from __future__ import annotations

import datetime as dt
import re

from .models import Priority, TaskValidationError

DATE_RE = re.compile(r"(\d{4})-(\d{1,2})-(\d{1,2})", re.ASCII)
TIME_RE = re.compile(r"(\d{1,2}):(\d{1,2})", re.ASCII)
TASK_NUMBER_RE = re.compile(r"[+-]?[0-9]+")

VALID_ACTIONS = ("add", "print", "edit", "delete", "end")
VALID_FIELDS = ("priority", "date", "time", "task")

INVALID_DATE = "The input date is invalid"
INVALID_TIME = "The input time is invalid"
INVALID_TASK_NUMBER = "Invalid task number"
INVALID_FIELD = "Invalid field"
INVALID_ACTION = "The input action is invalid"


def parse_priority(raw: str) -> Priority:
    code = raw.upper()
    try:
        return Priority(code)
    except ValueError as exc:
        raise TaskValidationError(f"Unknown priority: {raw!r}") from exc


def parse_date(raw: str) -> dt.date:
    match = DATE_RE.search(raw)
    if match is None:
        raise TaskValidationError(INVALID_DATE)
    year, month, day = (int(group) for group in match.groups())
    try:
        return dt.date(year, month, day)
    except ValueError as exc:
        raise TaskValidationError(INVALID_DATE) from exc


def parse_time(raw: str) -> dt.time:
    match = TIME_RE.search(raw)
    if match is None:
        raise TaskValidationError(INVALID_TIME)
    hour, minute = (int(group) for group in match.groups())
    try:
        return dt.time(hour, minute)
    except ValueError as exc:
        raise TaskValidationError(INVALID_TIME) from exc


def is_content_terminator(raw: str) -> bool:
    return not raw.strip()


def parse_content_line(raw: str) -> str:
    return raw.strip()


def parse_task_number(raw: str, task_count: int) -> int:
    """Return the 0-based index for a 1-based task number."""
    if not TASK_NUMBER_RE.fullmatch(raw):
        raise TaskValidationError(INVALID_TASK_NUMBER)
    number = int(raw)
    if number < 1 or number > task_count:
        raise TaskValidationError(INVALID_TASK_NUMBER)
    return number - 1


def parse_field(raw: str) -> str:
    if raw not in VALID_FIELDS:
        raise TaskValidationError(INVALID_FIELD)
    return raw


def parse_action(raw: str) -> str:
    if raw not in VALID_ACTIONS:
        raise TaskValidationError(INVALID_ACTION)
    return raw
