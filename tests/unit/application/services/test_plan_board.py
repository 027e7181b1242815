"""Tests for PlanBoard."""

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.application.services.plan_board import PlanBoard
from src.domain.entities.plan import Plan
from src.domain.errors import PlanNotFoundError, StorageError
from src.domain.ports.plan_watch_port import PlanWatchState
from src.domain.value_objects.task_status import TaskStatus


@pytest.fixture
def plan_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.list_all_plans.return_value = []
    return repo


@pytest.fixture
def watcher() -> MagicMock:
    watcher = MagicMock()
    watcher.subscribe.return_value = MagicMock()
    return watcher


class TestPlanBoard:
    async def test_refresh(self, plan_repo: AsyncMock, sample_plan: Plan) -> None:
        plan_repo.get_active_plan.return_value = sample_plan
        plan_repo.list_all_plans.return_value = [sample_plan]
        board = PlanBoard(plan_repo)

        assert await board.refresh() == sample_plan
        assert board.all_plans == [sample_plan]
        assert board.error is None

    async def test_refresh_without_active_plan(self, plan_repo: AsyncMock) -> None:
        plan_repo.get_active_plan.return_value = None
        board = PlanBoard(plan_repo)

        assert await board.refresh() is None
        assert board.error == "No active plan"

    async def test_refresh_error_is_kept_and_raised(self, plan_repo: AsyncMock) -> None:
        plan_repo.get_active_plan.side_effect = StorageError("list", Path("/plans"), "denied")
        board = PlanBoard(plan_repo)

        with pytest.raises(StorageError):
            await board.refresh()
        assert "denied" in (board.error or "")

    async def test_create_plan_sets_current(self, plan_repo: AsyncMock, sample_plan: Plan) -> None:
        plan_repo.create_plan.return_value = sample_plan
        plan_repo.list_all_plans.return_value = [sample_plan]
        board = PlanBoard(plan_repo)

        await board.create_plan("Plan", "", ["A"])

        assert board.current_plan == sample_plan
        assert board.all_plans == [sample_plan]

    async def test_write_arms_watcher_latch(
        self, plan_repo: AsyncMock, watcher: MagicMock, sample_plan: Plan
    ) -> None:
        plan_repo.get_active_plan.return_value = sample_plan
        plan_repo.update_task_status.return_value = sample_plan
        board = PlanBoard(plan_repo, watcher)

        await board.update_task_status("task-3", TaskStatus.IN_PROGRESS)

        watcher.set_updating_from_ui.assert_called_once_with(True)
        assert board.current_plan == sample_plan

    async def test_failed_write_releases_latch(self, plan_repo: AsyncMock, watcher: MagicMock) -> None:
        plan_repo.set_active_plan.side_effect = PlanNotFoundError("plan-x")
        board = PlanBoard(plan_repo, watcher)

        with pytest.raises(PlanNotFoundError):
            await board.set_active_plan("plan-x")

        assert [c.args for c in watcher.set_updating_from_ui.call_args_list] == [(True,), (False,)]

    async def test_delete_current_plan_clears_it(
        self, plan_repo: AsyncMock, watcher: MagicMock, sample_plan: Plan
    ) -> None:
        board = PlanBoard(plan_repo, watcher)
        board.current_plan = sample_plan
        board.all_plans = [sample_plan]

        await board.delete_plan(sample_plan.id)

        plan_repo.delete_plan.assert_awaited_once_with(sample_plan.id)
        assert board.current_plan is None
        assert board.all_plans == []

    def test_watcher_updates_replace_current_plan(
        self, plan_repo: AsyncMock, watcher: MagicMock, sample_plan: Plan
    ) -> None:
        board = PlanBoard(plan_repo, watcher)
        callback = watcher.subscribe.call_args.args[0]

        callback(PlanWatchState(plan=sample_plan, reload_counter=3))
        assert board.current_plan == sample_plan
        assert board.error is None

        callback(PlanWatchState(plan=None, reload_counter=4))
        assert board.current_plan is None
        assert board.error == "No active plan"

    def test_close_unsubscribes_once(self, plan_repo: AsyncMock, watcher: MagicMock) -> None:
        board = PlanBoard(plan_repo, watcher)
        unsubscribe = watcher.subscribe.return_value

        board.close()
        board.close()

        unsubscribe.assert_called_once_with()
