import sys
from pathlib import Path

import typer
from loguru import logger

from src.cli.commands import (
    activate_plan,
    create_plan,
    delete_plan,
    list_plans,
    serve,
    show_plan,
    update_status,
    watch_plan,
)
from src.infrastructure.config.settings import ENV_LOG_FILE, AppSettings


def setup_logging(verbose: bool = False, log_file: Path | None = None) -> None:
    """Configure loguru logging.

    Never logs to stdout: ``serve`` speaks the MCP protocol there.
    """
    logger.remove()

    file_path = log_file or AppSettings().log_file
    logger.add(
        file_path,
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}",
        level="DEBUG",
        rotation="10 MB",
        encoding="utf-8",
    )

    if verbose:
        logger.add(
            sys.stderr,
            format="{time:HH:mm:ss} | {level: <8} | {message}",
            level="DEBUG",
        )


app = typer.Typer(
    name="plan-server",
    help="Plan tool server - task plans stored as markdown, served over MCP",
    no_args_is_help=True,
)

# Register commands
app.command(name="serve")(serve.serve)

# Plan subcommand group
plan_app = typer.Typer(help="Plan management commands", no_args_is_help=True)
plan_app.command(name="list")(list_plans.list_plans)
plan_app.command(name="show")(show_plan.show_plan)
plan_app.command(name="create")(create_plan.create_plan)
plan_app.command(name="status")(update_status.update_status)
plan_app.command(name="activate")(activate_plan.activate_plan)
plan_app.command(name="delete")(delete_plan.delete_plan)
plan_app.command(name="watch")(watch_plan.watch_plan)
app.add_typer(plan_app, name="plan")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output", is_eager=True),
    log_file: Path | None = typer.Option(
        None, "--log-file", envvar=ENV_LOG_FILE, help="Log file path"
    ),
) -> None:
    """Plan tool server - task plans stored as markdown, served over MCP."""
    setup_logging(verbose=verbose, log_file=log_file)


if __name__ == "__main__":
    app()
