import asyncio
from pathlib import Path

import typer
from rich.console import Console

from src.application.use_cases.create_plan import CreatePlan
from src.cli.formatters.plan_formatter import plan_panel
from src.cli.theme import theme
from src.cli.utils import fail, open_repo, plans_dir_option, sanitize_terminal_input
from src.domain.errors import PlanError

console = Console()


def create_plan(
    name: str = typer.Argument(..., help="Plan name"),
    description: str = typer.Option("", "--description", "-d", help="Plan description"),
    tasks: list[str] = typer.Option([], "--task", "-t", help="Task title (repeatable)"),
    plans_dir: Path | None = plans_dir_option(),
) -> None:
    """Create a new plan and make it the active one."""
    asyncio.run(
        _create_plan(
            sanitize_terminal_input(name),
            sanitize_terminal_input(description),
            [sanitize_terminal_input(title) for title in tasks],
            plans_dir,
        )
    )


async def _create_plan(
    name: str, description: str, tasks: list[str], plans_dir: Path | None
) -> None:
    use_case = CreatePlan(open_repo(plans_dir))
    try:
        plan = await use_case.execute(name, description, tasks)
    except (PlanError, ValueError) as e:
        raise fail(console, str(e)) from e

    console.print(f"[{theme.SUCCESS}]Plan created:[/] {plan.id}")
    console.print(plan_panel(plan))
