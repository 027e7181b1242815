import asyncio
from pathlib import Path

from rich.console import Console

from src.cli.formatters.plan_formatter import plans_table
from src.cli.theme import theme
from src.cli.utils import fail, open_repo, plans_dir_option
from src.domain.errors import PlanError

console = Console()


def list_plans(plans_dir: Path | None = plans_dir_option()) -> None:
    """List all plans."""
    asyncio.run(_list_plans(plans_dir))


async def _list_plans(plans_dir: Path | None) -> None:
    repo = open_repo(plans_dir)
    try:
        plans = await repo.list_all_plans()
    except PlanError as e:
        raise fail(console, str(e)) from e

    if not plans:
        console.print(f"[{theme.DIM}]No plans found in {repo.plans_dir}[/]")
        return

    console.print(plans_table(plans))
