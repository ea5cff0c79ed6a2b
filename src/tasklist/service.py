"""Task list lifecycle: the state owned by one command-loop session."""

from __future__ import annotations

import datetime as dt
from pathlib import Path

from .models import (
    Priority,
    Settings,
    Task,
    TaskValidationError,
    current_date,
)
from . import storage


class TaskListService:
    def __init__(self, tasks_file: Path, settings: Settings | None = None) -> None:
        self.tasks_file = tasks_file
        self.settings = settings or Settings()
        self.tasks: list[Task] = []

    def load(self) -> list[Task]:
        self.tasks = storage.load_tasks(self.tasks_file)
        return self.tasks

    def save(self) -> None:
        storage.save_tasks(self.tasks_file, self.tasks)

    def today(self) -> dt.date:
        return current_date(self.settings.utc_offset_hours)

    def is_empty(self) -> bool:
        return not self.tasks

    def add_task(
        self,
        priority: Priority,
        date: dt.date,
        time: dt.time,
        content: list[str],
    ) -> Task:
        task = Task.new(content, priority, date, time)
        if task.is_blank():
            raise TaskValidationError("The task is blank")
        self.tasks.append(task)
        return task

    def get_task(self, index: int) -> Task:
        if index < 0 or index >= len(self.tasks):
            raise TaskValidationError("Invalid task number")
        return self.tasks[index]

    def update_field(self, index: int, field: str, value) -> Task:
        task = self.get_task(index)
        if field == "priority":
            task.set_priority(value)
        elif field == "date":
            task.set_date(value)
        elif field == "time":
            task.set_time(value)
        elif field == "task":
            task.set_content(value)
        else:
            raise TaskValidationError("Invalid field")
        return task

    def delete_task(self, index: int) -> Task:
        task = self.get_task(index)
        del self.tasks[index]
        return task
