from collections.abc import Iterator
from contextlib import contextmanager

from loguru import logger

from src.application.dto.task_status_change import TaskStatusChange
from src.application.use_cases.create_plan import CreatePlan
from src.application.use_cases.update_task_status import UpdateTaskStatus
from src.domain.entities.plan import Plan
from src.domain.errors import PlanError
from src.domain.ports.plan_repo_port import PlanRepoPort
from src.domain.ports.plan_watch_port import PlanWatchPort, PlanWatchState
from src.domain.value_objects.task_status import TaskStatus


class PlanBoard:
    """Presentation state for the active plan and the list of plans.

    Writes made through the board arm the watcher's suppression latch first,
    because the board already holds the resulting plan and does not need the
    file event reloaded back. External edits reach the board through the
    watcher subscription.
    """

    def __init__(self, plan_repo: PlanRepoPort, watcher: PlanWatchPort | None = None) -> None:
        self.plan_repo = plan_repo
        self.watcher = watcher
        self.current_plan: Plan | None = None
        self.all_plans: list[Plan] = []
        self.error: str | None = None
        self._unsubscribe = watcher.subscribe(self._on_watch_state) if watcher else None

    def close(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    async def refresh(self) -> Plan | None:
        self.error = None
        try:
            self.current_plan = await self.plan_repo.get_active_plan()
            self.all_plans = await self.plan_repo.list_all_plans()
        except PlanError as e:
            self.error = str(e)
            raise
        if self.current_plan is None:
            self.error = "No active plan"
        return self.current_plan

    async def create_plan(self, name: str, description: str, tasks: list[str]) -> Plan:
        plan = await CreatePlan(self.plan_repo).execute(name, description, tasks)
        self.current_plan = plan
        self.error = None
        await self._reload_plan_list()
        return plan

    async def update_task_status(
        self,
        task_id: str,
        status: TaskStatus | str,
        plan_id: str | None = None,
    ) -> TaskStatusChange:
        with self._self_write():
            change = await UpdateTaskStatus(self.plan_repo).execute(task_id, status, plan_id)
        if self.current_plan is None or self.current_plan.id == change.plan.id:
            self.current_plan = change.plan
        self._replace_in_list(change.plan)
        return change

    async def set_active_plan(self, plan_id: str) -> Plan:
        with self._self_write():
            plan = await self.plan_repo.set_active_plan(plan_id)
        self.current_plan = plan
        self.error = None
        await self._reload_plan_list()
        return plan

    async def delete_plan(self, plan_id: str) -> None:
        with self._self_write():
            await self.plan_repo.delete_plan(plan_id)
        if self.current_plan is not None and self.current_plan.id == plan_id:
            self.current_plan = None
        self.all_plans = [plan for plan in self.all_plans if plan.id != plan_id]

    @contextmanager
    def _self_write(self) -> Iterator[None]:
        if self.watcher is None:
            yield
            return
        self.watcher.set_updating_from_ui(True)
        try:
            yield
        except Exception:
            # Nothing was written, so no event will consume the latch
            self.watcher.set_updating_from_ui(False)
            raise

    def _on_watch_state(self, state: PlanWatchState) -> None:
        self.current_plan = state.plan
        self.error = None if state.plan is not None else "No active plan"
        if state.plan is not None:
            self._replace_in_list(state.plan)
        logger.debug("Board updated from watcher (reload #{})", state.reload_counter)

    def _replace_in_list(self, plan: Plan) -> None:
        self.all_plans = [plan if existing.id == plan.id else existing for existing in self.all_plans]

    async def _reload_plan_list(self) -> None:
        try:
            self.all_plans = await self.plan_repo.list_all_plans()
        except PlanError as e:
            logger.warning("Failed to reload plan list: {}", e)
            self.error = str(e)
