"""CLI utility functions."""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from src.cli.theme import theme
from src.infrastructure.config.settings import ENV_PLANS_DIR, AppSettings, load_settings
from src.infrastructure.persistence.local_file_store import LocalFileStore
from src.infrastructure.persistence.markdown_plan_repo import MarkdownPlanRepo

PLANS_DIR_OPTION_HELP = "Directory holding plan files"


def plans_dir_option() -> Path | None:
    """Shared ``--plans-dir`` option, also read from the environment."""
    return typer.Option(None, "--plans-dir", envvar=ENV_PLANS_DIR, help=PLANS_DIR_OPTION_HELP)


def build_repo(settings: AppSettings) -> MarkdownPlanRepo:
    return MarkdownPlanRepo(LocalFileStore(), settings.plans_dir)


def open_repo(plans_dir: Path | None) -> MarkdownPlanRepo:
    return build_repo(load_settings(plans_dir=plans_dir))


def sanitize_terminal_input(text: str) -> str:
    """Remove surrogate characters that can't be encoded as UTF-8.

    Terminal input can sometimes contain surrogate characters (U+D800 to U+DFFF)
    due to encoding issues. These characters are invalid in UTF-8 and would end
    up in the plan files.
    """
    return text.encode("utf-8", "ignore").decode("utf-8")


def fail(console: Console, message: str) -> typer.Exit:
    """Print an error and return the exit to raise."""
    console.print(f"[{theme.ERROR}]Error: {escape(message)}[/]")
    return typer.Exit(1)
