import asyncio
from pathlib import Path

import typer
from rich.console import Console

from src.cli.theme import theme
from src.cli.utils import fail, open_repo, plans_dir_option
from src.domain.errors import PlanError

console = Console()


def delete_plan(
    plan_id: str = typer.Argument(..., help="Plan ID to delete"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
    plans_dir: Path | None = plans_dir_option(),
) -> None:
    """Delete a plan file."""
    if not yes and not typer.confirm(f"Delete plan {plan_id}?"):
        console.print(f"[{theme.DIM}]Cancelled.[/]")
        return
    asyncio.run(_delete_plan(plan_id, plans_dir))


async def _delete_plan(plan_id: str, plans_dir: Path | None) -> None:
    repo = open_repo(plans_dir)
    try:
        await repo.delete_plan(plan_id)
    except PlanError as e:
        raise fail(console, str(e)) from e

    console.print(f"[{theme.SUCCESS}]Deleted plan {plan_id}[/]")
