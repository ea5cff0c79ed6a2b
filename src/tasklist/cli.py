"""CLI entrypoint for tasklist."""

from __future__ import annotations

from pathlib import Path
import sys
from typing import Annotated, Callable

import typer

from . import prompt_ui, render, storage
from .models import TaskError, TaskValidationError
from .prompt_ui import LineInput
from .service import TaskListService

TasksFileOption = Annotated[
    Path,
    typer.Option(
        "--file",
        envvar="TASKLIST_FILE",
        help="Backing JSON file for the task list",
    ),
]
ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Settings file (defaults to tasklist.yaml beside --file)"),
]
ColorOption = Annotated[
    bool | None,
    typer.Option("--color/--no-color", help="Render priority and due markers as colored blocks"),
]

app = typer.Typer(help="Interactive task list with priorities and due dates")


def _can_render_rich_table_output() -> bool:
    return sys.stdout.isatty()


def _print_rich(renderable) -> None:
    from rich.console import Console

    Console().print(renderable, crop=False)


def _warn_config(message: str) -> None:
    typer.echo(f"Warning: {message}", err=True)


def _run_and_handle(fn) -> None:
    try:
        fn()
    except TaskError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def _print_tasks(svc: TaskListService) -> None:
    if svc.is_empty():
        typer.echo(render.NO_TASKS)
        return
    if svc.settings.color and _can_render_rich_table_output():
        _print_rich(render.render_task_table_rich(svc.tasks, svc.today()))
        return
    typer.echo(render.render_task_table_plain(svc.tasks, svc.today(), color=svc.settings.color))


def _add(svc: TaskListService, source: LineInput) -> None:
    priority = prompt_ui.prompt_priority(source)
    date = prompt_ui.prompt_date(source)
    time = prompt_ui.prompt_time(source)
    content = prompt_ui.prompt_content(source)
    try:
        svc.add_task(priority, date, time, content)
    except TaskValidationError as exc:
        typer.echo(str(exc))


def _print(svc: TaskListService, source: LineInput) -> None:
    _print_tasks(svc)


FIELD_PROMPTS: dict[str, Callable[[LineInput], object]] = {
    "priority": prompt_ui.prompt_priority,
    "date": prompt_ui.prompt_date,
    "time": prompt_ui.prompt_time,
    "task": prompt_ui.prompt_content,
}


def _edit(svc: TaskListService, source: LineInput) -> None:
    if svc.is_empty():
        typer.echo(render.NO_TASKS)
        return
    _print_tasks(svc)
    index = prompt_ui.prompt_task_number(source, len(svc.tasks))
    field = prompt_ui.prompt_field(source)
    value = FIELD_PROMPTS[field](source)
    svc.update_field(index, field, value)
    typer.echo("The task is changed")


def _delete(svc: TaskListService, source: LineInput) -> None:
    if svc.is_empty():
        typer.echo(render.NO_TASKS)
        return
    _print_tasks(svc)
    index = prompt_ui.prompt_task_number(source, len(svc.tasks))
    svc.delete_task(index)
    typer.echo("The task is deleted")


ACTIONS: dict[str, Callable[[TaskListService, LineInput], None]] = {
    "add": _add,
    "print": _print,
    "edit": _edit,
    "delete": _delete,
}


def run_loop(svc: TaskListService, source: LineInput) -> None:
    while True:
        action = prompt_ui.prompt_action(source)
        if action == "end":
            typer.echo("Tasklist exiting!")
            svc.save()
            raise typer.Exit(code=0)
        ACTIONS[action](svc, source)


@app.command()
def run_cmd(
    tasks_file: TasksFileOption = Path(storage.DEFAULT_TASKS_FILE),
    config: ConfigOption = None,
    color: ColorOption = None,
) -> None:
    """Add, print, edit and delete tasks until 'end' saves and exits."""

    def _inner() -> None:
        config_path = config if config is not None else storage.default_config_path(tasks_file)
        settings = storage.resolve_settings(config_path, warn=_warn_config)
        if color is not None:
            settings.color = color
        svc = TaskListService(tasks_file, settings)
        svc.load()
        run_loop(svc, LineInput.from_stdin())

    _run_and_handle(_inner)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
