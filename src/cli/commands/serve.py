import asyncio
from pathlib import Path

from rich.console import Console

from src.cli.mcp.server import run_server
from src.cli.utils import build_repo, fail, plans_dir_option
from src.domain.errors import PlanError
from src.infrastructure.config.settings import load_settings

# stdout carries the protocol
console = Console(stderr=True)


def serve(plans_dir: Path | None = plans_dir_option()) -> None:
    """Run the plan tool server over stdio."""
    asyncio.run(_serve(plans_dir))


async def _serve(plans_dir: Path | None) -> None:
    settings = load_settings(plans_dir=plans_dir)
    try:
        await run_server(settings, build_repo(settings))
    except PlanError as e:
        raise fail(console, str(e)) from e
