"""Renderers for the task table."""

from __future__ import annotations

from dataclasses import dataclass
import datetime as dt
from typing import Iterable

from .models import (
    DUE_TAG_ANSI,
    DUE_TAG_STYLES,
    LINE_CAPACITY,
    PRIORITY_ANSI,
    PRIORITY_STYLES,
    DueTag,
    Priority,
    Task,
)

NO_TASKS = "No tasks have been input"

LINE_SEP = "+----+------------+-------+---+---+" + "-" * LINE_CAPACITY + "+"
HEADER = "| N  |    Date    | Time  | P | D |                   Task                     |"


@dataclass(frozen=True, slots=True)
class TableRow:
    """One physical table row; lead fields are None on continuation rows."""

    text: str
    index: int | None = None
    date: str | None = None
    time: str | None = None
    priority: Priority | None = None
    due: DueTag | None = None

    @property
    def is_lead(self) -> bool:
        return self.index is not None


def wrap_line(line: str, width: int = LINE_CAPACITY) -> list[str]:
    if not line:
        return [""]
    return [line[start : start + width] for start in range(0, len(line), width)]


def _index_cell(index: int) -> str:
    # Three or more digits push the row out of alignment.
    indent = "  " if len(str(index)) == 1 else " "
    return f" {index}{indent}"


def task_rows(task: Task, index: int, today: dt.date) -> list[TableRow]:
    rows: list[TableRow] = []
    for line in task.content:
        for segment in wrap_line(line):
            if rows:
                rows.append(TableRow(text=segment))
                continue
            rows.append(
                TableRow(
                    text=segment,
                    index=index,
                    date=task.due_date.isoformat(),
                    time=task.due_time.strftime("%H:%M"),
                    priority=task.priority,
                    due=task.due_tag(today),
                )
            )
    return rows


def task_table_rows(tasks: Iterable[Task], today: dt.date) -> list[list[TableRow]]:
    return [task_rows(task, index, today) for index, task in enumerate(tasks, start=1)]


def _ansi_block(code: str) -> str:
    return f"\033[{code}m \033[0m"


def _plain_markers(row: TableRow, color: bool) -> tuple[str, str]:
    if color:
        return _ansi_block(PRIORITY_ANSI[row.priority]), _ansi_block(DUE_TAG_ANSI[row.due])
    return row.priority.value, row.due.value


def _plain_row(row: TableRow, color: bool) -> str:
    text = row.text.ljust(LINE_CAPACITY)
    if not row.is_lead:
        return f"|    |            |       |   |   |{text}|"
    priority, due = _plain_markers(row, color)
    return f"|{_index_cell(row.index)}| {row.date} | {row.time} | {priority} | {due} |{text}|"


def render_task_table_plain(tasks: Iterable[Task], today: dt.date, *, color: bool = True) -> str:
    groups = task_table_rows(tasks, today)
    if not groups:
        return NO_TASKS

    lines = [LINE_SEP, HEADER, LINE_SEP]
    for rows in groups:
        lines.extend(_plain_row(row, color) for row in rows)
        lines.append(LINE_SEP)
    return "\n".join(lines)


def render_task_table_rich(tasks: Iterable[Task], today: dt.date):
    from rich.text import Text

    groups = task_table_rows(tasks, today)
    if not groups:
        return NO_TASKS

    table = Text(no_wrap=True, overflow="ignore")
    table.append(LINE_SEP + "\n", style="bright_black")
    table.append(HEADER + "\n", style="bold")
    table.append(LINE_SEP + "\n", style="bright_black")
    for rows in groups:
        for row in rows:
            text = row.text.ljust(LINE_CAPACITY)
            if not row.is_lead:
                table.append(f"|    |            |       |   |   |{text}|\n")
                continue
            table.append(f"|{_index_cell(row.index)}| {row.date} | {row.time} | ")
            table.append(" ", style=PRIORITY_STYLES[row.priority])
            table.append(" | ")
            table.append(" ", style=DUE_TAG_STYLES[row.due])
            table.append(f" |{text}|\n")
        table.append(LINE_SEP + "\n", style="bright_black")
    table.rstrip()
    return table
