"""Tests for CLI commands."""

from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest
import typer

from src.domain.entities.plan import Plan
from src.domain.errors import PlanNotFoundError, StorageError


class TestListPlans:
    """Tests for list_plans command."""

    async def test_list_plans_empty(self, tmp_path: Path) -> None:
        from src.cli.commands.list_plans import _list_plans

        with (
            patch("src.cli.commands.list_plans.open_repo") as mock_open_repo,
            patch("src.cli.commands.list_plans.console") as mock_console,
        ):
            mock_repo = AsyncMock()
            mock_repo.plans_dir = tmp_path
            mock_repo.list_all_plans.return_value = []
            mock_open_repo.return_value = mock_repo

            await _list_plans(tmp_path)

            mock_open_repo.assert_called_once_with(tmp_path)
            mock_console.print.assert_called_once()
            assert "No plans found" in str(mock_console.print.call_args)

    async def test_list_plans_with_plans(self, tmp_path: Path, sample_plan: Plan) -> None:
        from src.cli.commands.list_plans import _list_plans

        with (
            patch("src.cli.commands.list_plans.open_repo") as mock_open_repo,
            patch("src.cli.commands.list_plans.console") as mock_console,
        ):
            mock_repo = AsyncMock()
            mock_repo.list_all_plans.return_value = [sample_plan]
            mock_open_repo.return_value = mock_repo

            await _list_plans(None)

            mock_console.print.assert_called_once()

    async def test_list_plans_storage_error(self, tmp_path: Path) -> None:
        from src.cli.commands.list_plans import _list_plans

        with (
            patch("src.cli.commands.list_plans.open_repo") as mock_open_repo,
            patch("src.cli.commands.list_plans.console") as mock_console,
        ):
            mock_repo = AsyncMock()
            mock_repo.list_all_plans.side_effect = StorageError("list", tmp_path, "denied")
            mock_open_repo.return_value = mock_repo

            with pytest.raises(typer.Exit) as exc_info:
                await _list_plans(None)

            assert exc_info.value.exit_code == 1
            assert "denied" in str(mock_console.print.call_args)


class TestShowPlan:
    """Tests for show_plan command."""

    async def test_show_without_active_plan(self) -> None:
        from src.cli.commands.show_plan import _show_plan

        with (
            patch("src.cli.commands.show_plan.open_repo") as mock_open_repo,
            patch("src.cli.commands.show_plan.console") as mock_console,
        ):
            mock_repo = AsyncMock()
            mock_repo.get_active_plan.return_value = None
            mock_open_repo.return_value = mock_repo

            await _show_plan(None, None)

            assert "No active plan" in str(mock_console.print.call_args_list[0])

    async def test_show_by_id(self, sample_plan: Plan) -> None:
        from src.cli.commands.show_plan import _show_plan

        with (
            patch("src.cli.commands.show_plan.open_repo") as mock_open_repo,
            patch("src.cli.commands.show_plan.console"),
        ):
            mock_repo = AsyncMock()
            mock_repo.get_plan.return_value = sample_plan
            mock_open_repo.return_value = mock_repo

            await _show_plan(sample_plan.id, None)

            mock_repo.get_plan.assert_awaited_once_with(sample_plan.id)
            mock_repo.get_active_plan.assert_not_called()

    async def test_show_unknown_plan(self) -> None:
        from src.cli.commands.show_plan import _show_plan

        with (
            patch("src.cli.commands.show_plan.open_repo") as mock_open_repo,
            patch("src.cli.commands.show_plan.console") as mock_console,
        ):
            mock_repo = AsyncMock()
            mock_repo.get_plan.side_effect = PlanNotFoundError("plan-x")
            mock_open_repo.return_value = mock_repo

            with pytest.raises(typer.Exit):
                await _show_plan("plan-x", None)

            assert "Plan with ID plan-x not found" in str(mock_console.print.call_args)


class TestCreatePlan:
    """Tests for create_plan command."""

    async def test_create_without_tasks_fails(self, tmp_path: Path) -> None:
        from src.cli.commands.create_plan import _create_plan

        with patch("src.cli.commands.create_plan.console") as mock_console:
            with pytest.raises(typer.Exit):
                await _create_plan("Plan", "", [], tmp_path)

            assert "at least one task" in str(mock_console.print.call_args)
        assert not any(tmp_path.iterdir())

    async def test_create_writes_plan(self, tmp_path: Path) -> None:
        from src.cli.commands.create_plan import _create_plan

        with patch("src.cli.commands.create_plan.console") as mock_console:
            await _create_plan("Plan", "Desc", ["A", "B"], tmp_path)

        assert "Plan created" in str(mock_console.print.call_args_list[0])
        assert len(list(tmp_path.glob("plan-*.md"))) == 1


class TestUpdateStatus:
    """Tests for update_status command."""

    async def test_invalid_status(self, tmp_path: Path) -> None:
        from src.cli.commands.update_status import _update_status

        with patch("src.cli.commands.update_status.console") as mock_console:
            with pytest.raises(typer.Exit):
                await _update_status("task-1", "finished", None, tmp_path)

            assert "Unknown task status" in str(mock_console.print.call_args)

    async def test_no_active_plan(self, tmp_path: Path) -> None:
        from src.cli.commands.update_status import _update_status

        with patch("src.cli.commands.update_status.console") as mock_console:
            with pytest.raises(typer.Exit):
                await _update_status("task-1", "completed", None, tmp_path)

            assert "No active plan" in str(mock_console.print.call_args)


class TestDeletePlan:
    """Tests for delete_plan command."""

    def test_declined_confirmation_keeps_plan(self) -> None:
        from src.cli.commands.delete_plan import delete_plan

        with (
            patch("src.cli.commands.delete_plan.typer.confirm", return_value=False),
            patch("src.cli.commands.delete_plan.asyncio.run") as mock_run,
            patch("src.cli.commands.delete_plan.console") as mock_console,
        ):
            delete_plan("plan-x", yes=False, plans_dir=None)

            mock_run.assert_not_called()
            assert "Cancelled" in str(mock_console.print.call_args)
