"""Tests for plan use cases."""

from unittest.mock import AsyncMock

import pytest

from src.application.dto.task_status_change import TaskStatusChange
from src.application.use_cases.create_plan import CreatePlan
from src.application.use_cases.update_task_status import UpdateTaskStatus
from src.domain.entities.plan import Plan
from src.domain.errors import EmptyPlanError, NoActivePlanError, PlanNotFoundError, TaskNotFoundError
from src.domain.value_objects.task_status import TaskStatus


@pytest.fixture
def plan_repo() -> AsyncMock:
    return AsyncMock()


class TestCreatePlan:
    async def test_strips_input_and_drops_blank_tasks(self, plan_repo: AsyncMock, sample_plan: Plan) -> None:
        plan_repo.create_plan.return_value = sample_plan

        result = await CreatePlan(plan_repo).execute("  Plan  ", " desc ", ["  A ", "", "   ", "B"])

        assert result == sample_plan
        plan_repo.create_plan.assert_awaited_once_with("Plan", "desc", ["A", "B"])

    async def test_blank_name_rejected(self, plan_repo: AsyncMock) -> None:
        with pytest.raises(ValueError, match="Plan name must not be empty"):
            await CreatePlan(plan_repo).execute("   ", "", ["A"])
        plan_repo.create_plan.assert_not_called()

    async def test_only_blank_tasks_rejected(self, plan_repo: AsyncMock) -> None:
        with pytest.raises(EmptyPlanError):
            await CreatePlan(plan_repo).execute("Plan", "", ["", "  "])
        plan_repo.create_plan.assert_not_called()


class TestUpdateTaskStatus:
    async def test_updates_active_plan(self, plan_repo: AsyncMock, sample_plan: Plan) -> None:
        updated_tasks = [t.with_status(TaskStatus.COMPLETED) if t.id == "task-3" else t for t in sample_plan.tasks]
        updated = sample_plan.model_copy(update={"tasks": updated_tasks})
        plan_repo.get_active_plan.return_value = sample_plan
        plan_repo.update_task_status.return_value = updated

        change = await UpdateTaskStatus(plan_repo).execute("task-3", "completed")

        plan_repo.update_task_status.assert_awaited_once_with(sample_plan.id, "task-3", TaskStatus.COMPLETED)
        assert change.plan == updated
        assert change.previous_status == TaskStatus.PENDING
        assert change.new_status == TaskStatus.COMPLETED
        assert change.task.status == TaskStatus.COMPLETED

    async def test_explicit_plan_id(self, plan_repo: AsyncMock, sample_plan: Plan) -> None:
        plan_repo.get_plan.return_value = sample_plan
        plan_repo.update_task_status.return_value = sample_plan

        await UpdateTaskStatus(plan_repo).execute("task-1", TaskStatus.COMPLETED, plan_id=sample_plan.id)

        plan_repo.get_plan.assert_awaited_once_with(sample_plan.id)
        plan_repo.get_active_plan.assert_not_called()

    async def test_no_active_plan(self, plan_repo: AsyncMock) -> None:
        plan_repo.get_active_plan.return_value = None

        with pytest.raises(NoActivePlanError):
            await UpdateTaskStatus(plan_repo).execute("task-1", "completed")

    async def test_unknown_plan(self, plan_repo: AsyncMock) -> None:
        plan_repo.get_plan.side_effect = PlanNotFoundError("plan-missing")

        with pytest.raises(PlanNotFoundError, match="plan-missing"):
            await UpdateTaskStatus(plan_repo).execute("task-1", "completed", plan_id="plan-missing")

    async def test_unknown_task_does_not_write(self, plan_repo: AsyncMock, sample_plan: Plan) -> None:
        plan_repo.get_active_plan.return_value = sample_plan

        with pytest.raises(TaskNotFoundError, match="task-99"):
            await UpdateTaskStatus(plan_repo).execute("task-99", "completed")
        plan_repo.update_task_status.assert_not_called()

    async def test_invalid_status(self, plan_repo: AsyncMock) -> None:
        with pytest.raises(ValueError, match="Unknown task status"):
            await UpdateTaskStatus(plan_repo).execute("task-1", "done")
        plan_repo.get_active_plan.assert_not_called()


class TestCreatePlanRejectsStructuralText:
    """Input that would rewrite the plan layout never reaches the repository."""

    async def test_multiline_task_title(self, plan_repo: AsyncMock) -> None:
        with pytest.raises(ValueError, match="Task title must be a single line"):
            await CreatePlan(plan_repo).execute(
                "Demo", "desc", ["A\n- [x] task-9: injected (completed)", "B"]
            )
        plan_repo.create_plan.assert_not_called()

    async def test_multiline_name(self, plan_repo: AsyncMock) -> None:
        with pytest.raises(ValueError, match="Plan name must be a single line"):
            await CreatePlan(plan_repo).execute("Demo\n## Tasks", "desc", ["A"])
        plan_repo.create_plan.assert_not_called()

    @pytest.mark.parametrize("line", ["## Tasks", "## Description", "**Status:** Завершен"])
    async def test_description_with_header_lines(self, plan_repo: AsyncMock, line: str) -> None:
        with pytest.raises(ValueError, match="must not contain plan headers"):
            await CreatePlan(plan_repo).execute("Demo", f"intro\n{line}\noutro", ["A"])
        plan_repo.create_plan.assert_not_called()

    async def test_multiline_description_is_allowed(self, plan_repo: AsyncMock, sample_plan: Plan) -> None:
        plan_repo.create_plan.return_value = sample_plan

        await CreatePlan(plan_repo).execute("Demo", "first\nsecond", ["A"])

        plan_repo.create_plan.assert_awaited_once_with("Demo", "first\nsecond", ["A"])


class TestTaskStatusChange:
    def test_task_missing_from_plan(self, sample_plan: Plan) -> None:
        change = TaskStatusChange(
            plan=sample_plan,
            task_id="task-42",
            previous_status=TaskStatus.PENDING,
            new_status=TaskStatus.COMPLETED,
        )

        with pytest.raises(TaskNotFoundError, match="task-42"):
            _ = change.task
