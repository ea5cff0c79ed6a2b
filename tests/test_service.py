from __future__ import annotations

import datetime as dt
from pathlib import Path

import pytest

from tasklist.models import Priority, Settings, TaskValidationError
from tasklist.service import TaskListService


def _service(tmp_path: Path) -> TaskListService:
    return TaskListService(tmp_path / "tasklist.json")


def test_add_task_appends_in_insertion_order(tmp_path: Path) -> None:
    svc = _service(tmp_path)
    svc.add_task(Priority.LOW, dt.date(2030, 1, 1), dt.time(9, 0), ["first"])
    svc.add_task(Priority.HIGH, dt.date(2029, 1, 1), dt.time(8, 0), ["second"])
    assert [task.content for task in svc.tasks] == [["first"], ["second"]]


def test_add_blank_task_is_rejected(tmp_path: Path) -> None:
    svc = _service(tmp_path)
    with pytest.raises(TaskValidationError, match="The task is blank"):
        svc.add_task(Priority.LOW, dt.date(2030, 1, 1), dt.time(9, 0), [])
    assert svc.is_empty()


def test_update_field_dispatches_to_setters(tmp_path: Path) -> None:
    svc = _service(tmp_path)
    svc.add_task(Priority.LOW, dt.date(2030, 1, 1), dt.time(9, 0), ["first"])
    svc.update_field(0, "priority", Priority.CRITICAL)
    svc.update_field(0, "date", dt.date(2031, 6, 7))
    svc.update_field(0, "time", dt.time(18, 30))
    task = svc.update_field(0, "task", ["rewritten"])
    assert task.priority is Priority.CRITICAL
    assert task.due_date == dt.date(2031, 6, 7)
    assert task.due_time == dt.time(18, 30)
    assert task.content == ["rewritten"]


def test_update_unknown_field_raises(tmp_path: Path) -> None:
    svc = _service(tmp_path)
    svc.add_task(Priority.LOW, dt.date(2030, 1, 1), dt.time(9, 0), ["first"])
    with pytest.raises(TaskValidationError, match="Invalid field"):
        svc.update_field(0, "owner", "me")


def test_delete_task_removes_by_index(tmp_path: Path) -> None:
    svc = _service(tmp_path)
    svc.add_task(Priority.LOW, dt.date(2030, 1, 1), dt.time(9, 0), ["first"])
    svc.add_task(Priority.LOW, dt.date(2030, 1, 1), dt.time(9, 0), ["second"])
    removed = svc.delete_task(0)
    assert removed.content == ["first"]
    assert [task.content for task in svc.tasks] == [["second"]]
    with pytest.raises(TaskValidationError, match="Invalid task number"):
        svc.delete_task(1)


def test_save_and_load_round_trip(tmp_path: Path) -> None:
    svc = _service(tmp_path)
    svc.add_task(Priority.NORMAL, dt.date(2030, 1, 1), dt.time(9, 0), ["Buy milk", "2 litres"])
    svc.save()

    reloaded = _service(tmp_path)
    assert reloaded.load() == svc.tasks


def test_today_uses_configured_offset(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    seen: list[int] = []

    def fake_current_date(offset_hours: int) -> dt.date:
        seen.append(offset_hours)
        return dt.date(2026, 1, 1)

    monkeypatch.setattr("tasklist.service.current_date", fake_current_date)
    svc = TaskListService(tmp_path / "tasklist.json", Settings(utc_offset_hours=-5))
    assert svc.today() == dt.date(2026, 1, 1)
    assert seen == [-5]
