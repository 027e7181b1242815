from src.application.dto.task_status_change import TaskStatusChange
from src.domain.errors import NoActivePlanError, TaskNotFoundError
from src.domain.ports.plan_repo_port import PlanRepoPort
from src.domain.value_objects.task_status import TaskStatus


class UpdateTaskStatus:
    def __init__(self, plan_repo: PlanRepoPort) -> None:
        self.plan_repo = plan_repo

    async def execute(
        self,
        task_id: str,
        status: TaskStatus | str,
        plan_id: str | None = None,
    ) -> TaskStatusChange:
        """Set a task's status in the given plan, or in the active plan.

        Any transition is accepted, including leaving completed or
        cancelled.
        """
        new_status = status if isinstance(status, TaskStatus) else TaskStatus.parse(status)

        if plan_id is None:
            plan = await self.plan_repo.get_active_plan()
            if plan is None:
                raise NoActivePlanError()
        else:
            plan = await self.plan_repo.get_plan(plan_id)

        task = plan.find_task(task_id)
        if task is None:
            raise TaskNotFoundError(plan.id, task_id)

        updated = await self.plan_repo.update_task_status(plan.id, task_id, new_status)
        return TaskStatusChange(
            plan=updated,
            task_id=task_id,
            previous_status=task.status,
            new_status=new_status,
        )
