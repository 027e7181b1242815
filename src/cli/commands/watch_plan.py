import asyncio
import contextlib
from pathlib import Path

import typer
from rich.console import Console
from rich.live import Live

from src.cli.formatters.plan_formatter import watch_panel
from src.cli.theme import theme
from src.cli.utils import build_repo, fail, plans_dir_option
from src.domain.errors import PlanError
from src.infrastructure.config.settings import load_settings
from src.infrastructure.watching.plan_change_watcher import PlanChangeWatcher

console = Console()


def watch_plan(
    plans_dir: Path | None = plans_dir_option(),
    interval: float | None = typer.Option(None, "--interval", "-i", help="Seconds between scans"),
) -> None:
    """Show the active plan and refresh it whenever a plan file changes."""
    with contextlib.suppress(KeyboardInterrupt):
        asyncio.run(_watch_plan(plans_dir, interval))
    console.print(f"[{theme.DIM}]Stopped watching.[/]")


async def _watch_plan(plans_dir: Path | None, interval: float | None) -> None:
    settings = load_settings(plans_dir=plans_dir)
    watcher = PlanChangeWatcher(
        build_repo(settings),
        settings.plans_dir,
        poll_interval=interval or settings.watch_poll_interval,
        suppression_delay=settings.ui_suppression_delay,
    )
    try:
        await watcher.start()
    except PlanError as e:
        raise fail(console, str(e)) from e

    try:
        with Live(watch_panel(watcher.state), console=console, auto_refresh=False) as live:
            async for state in watcher.updates():
                live.update(watch_panel(state), refresh=True)
    finally:
        await watcher.stop()
