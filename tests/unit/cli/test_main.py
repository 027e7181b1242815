"""Tests for CLI main module."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from src.cli.main import app, setup_logging
from src.infrastructure.config.settings import ENV_POLL_INTERVAL


@pytest.fixture
def runner(monkeypatch: pytest.MonkeyPatch) -> CliRunner:
    monkeypatch.delenv(ENV_POLL_INTERVAL, raising=False)
    return CliRunner()


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_logging_default(self, tmp_path: Path) -> None:
        """Default logging writes to the given file only."""
        from loguru import logger

        log_file = tmp_path / "server.log"
        setup_logging(verbose=False, log_file=log_file)
        logger.info("hello log")

        assert len(logger._core.handlers) == 1
        assert "hello log" in log_file.read_text(encoding="utf-8")

    def test_setup_logging_verbose(self, tmp_path: Path) -> None:
        """Verbose logging adds a stderr handler."""
        from loguru import logger

        setup_logging(verbose=True, log_file=tmp_path / "server.log")

        assert len(logger._core.handlers) == 2


class TestApp:
    def _invoke(self, runner: CliRunner, tmp_path: Path, *args: str):
        return runner.invoke(app, ["--log-file", str(tmp_path / "cli.log"), *args])

    def test_help_lists_commands(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "serve" in result.output
        assert "plan" in result.output

    def test_plan_workflow(self, runner: CliRunner, tmp_path: Path) -> None:
        plans_dir = str(tmp_path / "plans")

        result = self._invoke(
            runner, tmp_path, "plan", "create", "Feature", "-d", "Ship it",
            "-t", "Design", "-t", "Build", "--plans-dir", plans_dir,
        )
        assert result.exit_code == 0, result.output
        assert "Plan created" in result.output

        result = self._invoke(runner, tmp_path, "plan", "status", "task-1", "completed", "--plans-dir", plans_dir)
        assert result.exit_code == 0, result.output
        assert "50% (1/2)" in result.output

        result = self._invoke(runner, tmp_path, "plan", "show", "--plans-dir", plans_dir)
        assert result.exit_code == 0, result.output
        assert "Feature" in result.output

        result = self._invoke(runner, tmp_path, "plan", "list", "--plans-dir", plans_dir)
        assert result.exit_code == 0, result.output
        assert "plan-" in result.output

    def test_plans_dir_from_environment(self, runner: CliRunner, tmp_path: Path) -> None:
        plans_dir = tmp_path / "env-plans"
        result = runner.invoke(
            app,
            ["--log-file", str(tmp_path / "cli.log"), "plan", "create", "Env", "-t", "A"],
            env={"PLAN_SERVER_PLANS_DIR": str(plans_dir)},
        )
        assert result.exit_code == 0, result.output
        assert len(list(plans_dir.glob("plan-*.md"))) == 1

    def test_unknown_task_exits_with_error(self, runner: CliRunner, tmp_path: Path) -> None:
        plans_dir = str(tmp_path / "plans")
        self._invoke(runner, tmp_path, "plan", "create", "Feature", "-t", "A", "--plans-dir", plans_dir)

        result = self._invoke(runner, tmp_path, "plan", "status", "task-9", "completed", "--plans-dir", plans_dir)

        assert result.exit_code == 1
        assert "Task with ID task-9 not found" in result.output

    def test_delete_with_yes(self, runner: CliRunner, tmp_path: Path) -> None:
        plans_dir = tmp_path / "plans"
        self._invoke(runner, tmp_path, "plan", "create", "Feature", "-t", "A", "--plans-dir", str(plans_dir))
        plan_id = next(plans_dir.glob("plan-*.md")).stem.split("-", 3)[-1]

        result = self._invoke(runner, tmp_path, "plan", "delete", plan_id, "--yes", "--plans-dir", str(plans_dir))

        assert result.exit_code == 0, result.output
        assert not list(plans_dir.glob("plan-*.md"))
