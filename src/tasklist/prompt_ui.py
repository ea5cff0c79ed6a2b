"""Prompt-based interactive helpers."""

from __future__ import annotations

from dataclasses import dataclass
import datetime as dt
import sys
from typing import Callable, TextIO, TypeVar

import typer

from .models import Priority, TaskValidationError
from . import validators

T = TypeVar("T")

PRIORITY_PROMPT = "Input the task priority (C, H, N, L):"
DATE_PROMPT = "Input the date (yyyy-mm-dd):"
TIME_PROMPT = "Input the time (hh:mm):"
CONTENT_PROMPT = "Input a new task (enter a blank line to end):"
FIELD_PROMPT = "Input a field to edit (priority, date, time, task):"
ACTION_PROMPT = "Input an action (add, print, edit, delete, end):"


@dataclass
class LineInput:
    """Single shared line source for every prompt in a session."""

    stream: TextIO

    @classmethod
    def from_stdin(cls) -> "LineInput":
        return cls(sys.stdin)

    def read_line(self) -> str:
        line = self.stream.readline()
        if not line:
            raise typer.Abort()
        return line.rstrip("\r\n")


def _prompt_until_valid(
    source: LineInput,
    message: str,
    parse: Callable[[str], T],
    *,
    echo_errors: bool = True,
) -> T:
    while True:
        typer.echo(message)
        raw = source.read_line()
        try:
            return parse(raw)
        except TaskValidationError as exc:
            if echo_errors:
                typer.echo(str(exc))


def prompt_priority(source: LineInput) -> Priority:
    return _prompt_until_valid(
        source,
        PRIORITY_PROMPT,
        validators.parse_priority,
        echo_errors=False,
    )


def prompt_date(source: LineInput) -> dt.date:
    return _prompt_until_valid(source, DATE_PROMPT, validators.parse_date)


def prompt_time(source: LineInput) -> dt.time:
    return _prompt_until_valid(source, TIME_PROMPT, validators.parse_time)


def prompt_content(source: LineInput) -> list[str]:
    typer.echo(CONTENT_PROMPT)
    lines: list[str] = []
    while True:
        raw = source.read_line()
        if validators.is_content_terminator(raw):
            return lines
        lines.append(validators.parse_content_line(raw))


def prompt_task_number(source: LineInput, task_count: int) -> int:
    return _prompt_until_valid(
        source,
        f"Input the task number (1-{task_count}):",
        lambda raw: validators.parse_task_number(raw, task_count),
    )


def prompt_field(source: LineInput) -> str:
    return _prompt_until_valid(source, FIELD_PROMPT, validators.parse_field)


def prompt_action(source: LineInput) -> str:
    return _prompt_until_valid(source, ACTION_PROMPT, validators.parse_action)
