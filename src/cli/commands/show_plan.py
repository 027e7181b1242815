import asyncio
from pathlib import Path

import typer
from rich.console import Console

from src.cli.formatters.plan_formatter import plan_panel
from src.cli.theme import theme
from src.cli.utils import fail, open_repo, plans_dir_option
from src.domain.errors import PlanError

console = Console()


def show_plan(
    plan_id: str | None = typer.Argument(None, help="Plan ID (defaults to the active plan)"),
    plans_dir: Path | None = plans_dir_option(),
) -> None:
    """Show a plan with its tasks."""
    asyncio.run(_show_plan(plan_id, plans_dir))


async def _show_plan(plan_id: str | None, plans_dir: Path | None) -> None:
    repo = open_repo(plans_dir)
    try:
        plan = await repo.get_plan(plan_id) if plan_id else await repo.get_active_plan()
    except PlanError as e:
        raise fail(console, str(e)) from e

    if plan is None:
        console.print(f"[{theme.WARNING}]No active plan.[/]")
        console.print(f"[{theme.DIM}]Create one with 'plan-server plan create'.[/]")
        return

    console.print(plan_panel(plan))
