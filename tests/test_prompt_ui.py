from __future__ import annotations

import datetime as dt
import io

import pytest
import typer

from tasklist import prompt_ui
from tasklist.models import Priority
from tasklist.prompt_ui import LineInput


def _source(*lines: str) -> LineInput:
    return LineInput(io.StringIO("".join(f"{line}\n" for line in lines)))


def test_prompt_date_reprompts_until_real_calendar_date(capsys: pytest.CaptureFixture[str]) -> None:
    source = _source("2030-13-01", "2030-2-30", "soon", "2030-1-1")
    assert prompt_ui.prompt_date(source) == dt.date(2030, 1, 1)

    out = capsys.readouterr().out.splitlines()
    assert out.count("Input the date (yyyy-mm-dd):") == 4
    assert out.count("The input date is invalid") == 3


def test_prompt_time_reprompts_on_out_of_range(capsys: pytest.CaptureFixture[str]) -> None:
    source = _source("25:00", "9:00")
    assert prompt_ui.prompt_time(source) == dt.time(9, 0)
    assert "The input time is invalid" in capsys.readouterr().out


def test_prompt_priority_reprompts_silently(capsys: pytest.CaptureFixture[str]) -> None:
    source = _source("x", "urgent", "c")
    assert prompt_ui.prompt_priority(source) is Priority.CRITICAL

    out = capsys.readouterr().out.splitlines()
    assert out == ["Input the task priority (C, H, N, L):"] * 3


def test_prompt_content_trims_and_stops_at_blank_line(capsys: pytest.CaptureFixture[str]) -> None:
    source = _source("  Buy milk ", "\tand bread", "   ", "never read")
    assert prompt_ui.prompt_content(source) == ["Buy milk", "and bread"]
    assert source.read_line() == "never read"
    assert capsys.readouterr().out == "Input a new task (enter a blank line to end):\n"


def test_prompt_content_allows_empty_result() -> None:
    assert prompt_ui.prompt_content(_source("")) == []


def test_prompt_task_number_rejects_zero_and_count_plus_one(capsys: pytest.CaptureFixture[str]) -> None:
    source = _source("0", "3", "abc", "2")
    assert prompt_ui.prompt_task_number(source, 2) == 1

    out = capsys.readouterr().out.splitlines()
    assert out.count("Input the task number (1-2):") == 4
    assert out.count("Invalid task number") == 3


def test_prompt_field_reprompts(capsys: pytest.CaptureFixture[str]) -> None:
    source = _source("title", "time")
    assert prompt_ui.prompt_field(source) == "time"
    assert "Invalid field" in capsys.readouterr().out


def test_prompt_action_reprompts(capsys: pytest.CaptureFixture[str]) -> None:
    source = _source("list", "print")
    assert prompt_ui.prompt_action(source) == "print"
    assert "The input action is invalid" in capsys.readouterr().out


def test_read_line_aborts_at_end_of_input() -> None:
    with pytest.raises(typer.Abort):
        _source().read_line()


def test_read_line_strips_line_endings_only() -> None:
    source = LineInput(io.StringIO("  padded  \r\n"))
    assert source.read_line() == "  padded  "
