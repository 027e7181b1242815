import asyncio
from pathlib import Path

import typer
from rich.console import Console

from src.cli.theme import theme
from src.cli.utils import fail, open_repo, plans_dir_option
from src.domain.errors import PlanError

console = Console()


def activate_plan(
    plan_id: str = typer.Argument(..., help="Plan ID to make active"),
    plans_dir: Path | None = plans_dir_option(),
) -> None:
    """Make a plan the active one."""
    asyncio.run(_activate_plan(plan_id, plans_dir))


async def _activate_plan(plan_id: str, plans_dir: Path | None) -> None:
    repo = open_repo(plans_dir)
    try:
        plan = await repo.set_active_plan(plan_id)
    except PlanError as e:
        raise fail(console, str(e)) from e

    console.print(f"[{theme.SUCCESS}]Active plan:[/] {plan.id} ({plan.name})")
