import asyncio
from pathlib import Path

import typer
from rich.console import Console

from src.application.use_cases.update_task_status import UpdateTaskStatus
from src.cli.formatters.plan_formatter import tasks_table
from src.cli.formatters.plan_text import format_progress
from src.cli.theme import theme
from src.cli.utils import fail, open_repo, plans_dir_option
from src.domain.errors import PlanError


console = Console()


def update_status(
    task_id: str = typer.Argument(..., help="Task ID, e.g. task-1"),
    status: str = typer.Argument(..., help="pending, in_progress, completed or cancelled"),
    plan_id: str | None = typer.Option(None, "--plan-id", "-p", help="Plan ID (defaults to the active plan)"),
    plans_dir: Path | None = plans_dir_option(),
) -> None:
    """Change the status of a task."""
    asyncio.run(_update_status(task_id, status, plan_id, plans_dir))


async def _update_status(
    task_id: str, status: str, plan_id: str | None, plans_dir: Path | None
) -> None:
    use_case = UpdateTaskStatus(open_repo(plans_dir))
    try:
        change = await use_case.execute(task_id, status, plan_id)
    except (PlanError, ValueError) as e:
        raise fail(console, str(e)) from e

    console.print(
        f"[{theme.SUCCESS}]{change.task_id}:[/] "
        f"{change.previous_status.value} → "
        f"[{theme.task_status(change.new_status)}]{change.new_status.value}[/]"
    )
    console.print(tasks_table(change.plan))
    console.print(f"[{theme.DIM}]Progress: {format_progress(change.plan)}[/]")
