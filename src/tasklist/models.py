"""Core task models and constants."""

from __future__ import annotations

from dataclasses import dataclass
import datetime as dt
from enum import Enum
from typing import Any

LINE_CAPACITY = 44
DEFAULT_UTC_OFFSET_HOURS = 2
TASK_RECORD_KEYS = ("content", "priority", "year", "month", "day", "hour", "minute")


class Priority(str, Enum):
    CRITICAL = "C"
    HIGH = "H"
    NORMAL = "N"
    LOW = "L"


class DueTag(str, Enum):
    IN_TIME = "I"
    TODAY = "T"
    OVERDUE = "O"


PRIORITY_LABELS = {
    Priority.CRITICAL: "Critical",
    Priority.HIGH: "High",
    Priority.NORMAL: "Normal",
    Priority.LOW: "Low",
}
DUE_TAG_LABELS = {
    DueTag.IN_TIME: "In time",
    DueTag.TODAY: "Today",
    DueTag.OVERDUE: "Overdue",
}

# ANSI bright background codes for the one-cell marker blocks.
PRIORITY_ANSI = {
    Priority.CRITICAL: "101",
    Priority.HIGH: "103",
    Priority.NORMAL: "102",
    Priority.LOW: "104",
}
DUE_TAG_ANSI = {
    DueTag.IN_TIME: "102",
    DueTag.TODAY: "103",
    DueTag.OVERDUE: "101",
}

PRIORITY_STYLES = {
    Priority.CRITICAL: "on bright_red",
    Priority.HIGH: "on bright_yellow",
    Priority.NORMAL: "on bright_green",
    Priority.LOW: "on bright_blue",
}
DUE_TAG_STYLES = {
    DueTag.IN_TIME: "on bright_green",
    DueTag.TODAY: "on bright_yellow",
    DueTag.OVERDUE: "on bright_red",
}


def current_date(
    offset_hours: int = DEFAULT_UTC_OFFSET_HOURS,
    now: dt.datetime | None = None,
) -> dt.date:
    """Return today's date at a fixed UTC offset, not the system zone."""
    zone = dt.timezone(dt.timedelta(hours=offset_hours))
    moment = now if now is not None else dt.datetime.now(dt.timezone.utc)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=dt.timezone.utc)
    return moment.astimezone(zone).date()


@dataclass(slots=True)
class Task:
    content: list[str]
    priority: Priority
    year: int
    month: int
    day: int
    hour: int
    minute: int

    @classmethod
    def new(cls, content: list[str], priority: Priority, date: dt.date, time: dt.time) -> "Task":
        return cls(
            content=list(content),
            priority=priority,
            year=date.year,
            month=date.month,
            day=date.day,
            hour=time.hour,
            minute=time.minute,
        )

    @property
    def due_date(self) -> dt.date:
        return dt.date(self.year, self.month, self.day)

    @property
    def due_time(self) -> dt.time:
        return dt.time(self.hour, self.minute)

    def is_blank(self) -> bool:
        return not self.content

    def due_tag(self, today: dt.date) -> DueTag:
        delta = (self.due_date - today).days
        if delta == 0:
            return DueTag.TODAY
        if delta > 0:
            return DueTag.IN_TIME
        return DueTag.OVERDUE

    def set_priority(self, priority: Priority) -> None:
        self.priority = priority

    def set_date(self, date: dt.date) -> None:
        self.year = date.year
        self.month = date.month
        self.day = date.day

    def set_time(self, time: dt.time) -> None:
        self.hour = time.hour
        self.minute = time.minute

    def set_content(self, content: list[str]) -> None:
        self.content = list(content)

    def to_dict(self) -> dict[str, Any]:
        return {
            "content": list(self.content),
            "priority": self.priority.value,
            "year": self.year,
            "month": self.month,
            "day": self.day,
            "hour": self.hour,
            "minute": self.minute,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Task":
        missing = [key for key in TASK_RECORD_KEYS if key not in data]
        if missing:
            raise TaskValidationError(f"Task record missing keys {missing}")
        content = data["content"]
        if not isinstance(content, list) or not all(isinstance(line, str) for line in content):
            raise TaskValidationError("Task content must be a list of strings")
        try:
            priority = Priority(data["priority"])
        except ValueError as exc:
            raise TaskValidationError(f"Unknown priority: {data['priority']!r}") from exc
        numbers = {}
        for key in ("year", "month", "day", "hour", "minute"):
            value = data[key]
            if not isinstance(value, int) or isinstance(value, bool):
                raise TaskValidationError(f"Task field '{key}' must be an integer")
            numbers[key] = value
        task = cls(content=list(content), priority=priority, **numbers)
        try:
            task.due_date
            task.due_time
        except ValueError as exc:
            raise TaskValidationError(f"Invalid due date/time: {exc}") from exc
        return task


@dataclass(slots=True)
class Settings:
    color: bool = True
    utc_offset_hours: int = DEFAULT_UTC_OFFSET_HOURS


class TaskError(Exception):
    """Base error for task operations."""


class TaskValidationError(TaskError):
    """Raised when user input or a stored record is invalid."""


class TaskStoreError(TaskError):
    """Raised when the backing file cannot be read or written."""
