from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from uuid import uuid4

from loguru import logger

from src.domain.entities.plan import Plan
from src.domain.entities.task import Task
from src.domain.errors import (
    EmptyPlanError,
    FileMissingError,
    PlanNotFoundError,
    PlanParseError,
    StorageError,
    TaskNotFoundError,
)
from src.domain.ports.file_store_port import FileStorePort
from src.domain.ports.plan_repo_port import PlanRepoPort
from src.domain.services.plan_markdown_codec import PlanMarkdownCodec
from src.domain.value_objects.plan_status import PLAN_STATUS_COMPLETED, PLAN_STATUS_IN_PROGRESS
from src.domain.value_objects.task_status import TaskStatus
from src.infrastructure.persistence._paths import PlanPathBuilder


def generate_plan_id() -> str:
    return f"plan-{uuid4().hex[:8]}"


def _now() -> datetime:
    return datetime.now().replace(microsecond=0)


class MarkdownPlanRepo(PlanRepoPort):
    """One markdown file per plan inside ``plans_dir``.

    The repository is stateless between calls: every operation re-reads the
    directory. Mutations are not serialized across calls, so two concurrent
    create/activate calls can leave more than one plan active; callers are
    expected to be a single writer.
    """

    def __init__(
        self,
        file_store: FileStorePort,
        plans_dir: Path,
        codec: PlanMarkdownCodec | None = None,
        clock: Callable[[], datetime] = _now,
        id_factory: Callable[[], str] = generate_plan_id,
    ) -> None:
        self.file_store = file_store
        self.plans_dir = plans_dir.absolute()
        self.codec = codec or PlanMarkdownCodec()
        self.clock = clock
        self.id_factory = id_factory
        self._paths = PlanPathBuilder(self.plans_dir)

    async def create_plan(self, name: str, description: str, task_titles: list[str]) -> Plan:
        if not task_titles:
            raise EmptyPlanError()

        plan_id = self.id_factory()
        created_at = self.clock().replace(microsecond=0)
        plan = Plan(
            id=plan_id,
            name=name,
            description=description,
            created_at=created_at,
            status=PLAN_STATUS_IN_PROGRESS,
            is_active=True,
            tasks=[
                Task(id=f"task-{index}", title=title, status=TaskStatus.PENDING, order=index)
                for index, title in enumerate(task_titles, start=1)
            ],
            file_path=self._paths.plan_file(created_at, plan_id),
        )
        # Encode before touching the disk so unencodable input changes nothing
        content = self.codec.encode(plan)

        if not self.file_store.directory_exists(self.plans_dir):
            await self.file_store.create_directory(self.plans_dir)

        await self._deactivate_all()
        await self.file_store.write_file(plan.file_path, content)
        logger.info("Created plan {} '{}' with {} tasks", plan.id, plan.name, len(plan.tasks))
        return plan

    async def get_active_plan(self) -> Plan | None:
        active = [plan for plan in await self.list_all_plans() if plan.is_active]
        if len(active) > 1:
            logger.warning(
                "{} plans are marked active ({}), using {}",
                len(active),
                ", ".join(plan.id for plan in active),
                active[0].id,
            )
        return active[0] if active else None

    async def get_plan(self, plan_id: str) -> Plan:
        for plan in await self.list_all_plans():
            if plan.id == plan_id:
                return plan
        raise PlanNotFoundError(plan_id)

    async def update_task_status(self, plan_id: str, task_id: str, status: TaskStatus) -> Plan:
        plan = await self.get_plan(plan_id)
        if plan.find_task(task_id) is None:
            raise TaskNotFoundError(plan_id, task_id)

        tasks = [task.with_status(status) if task.id == task_id else task for task in plan.tasks]
        updated = plan.model_copy(update={"tasks": tasks})
        if updated.is_completed():
            updated = updated.model_copy(update={"status": PLAN_STATUS_COMPLETED})

        await self._save(updated)
        logger.info("Task {} of plan {} set to {}", task_id, plan_id, status.value)
        return updated

    async def list_all_plans(self) -> list[Plan]:
        if not self.file_store.directory_exists(self.plans_dir):
            return []

        plans: list[Plan] = []
        for path in await self.file_store.list_files(self.plans_dir):
            if not self._paths.is_plan_file(path):
                continue
            try:
                content = await self.file_store.read_file(path)
                plans.append(self.codec.decode(content, path))
            except (PlanParseError, StorageError, FileMissingError) as e:
                logger.warning("Skipping plan file {}: {}", path, e)
        return plans

    async def delete_plan(self, plan_id: str) -> None:
        plan = await self.get_plan(plan_id)
        await self.file_store.delete_file(plan.file_path)
        logger.info("Deleted plan {} ({})", plan_id, plan.file_path)

    async def set_active_plan(self, plan_id: str) -> Plan:
        plans = await self.list_all_plans()
        target = next((plan for plan in plans if plan.id == plan_id), None)
        if target is None:
            raise PlanNotFoundError(plan_id)

        # No rollback: a failed write leaves earlier files rewritten
        for plan in plans:
            await self._save(plan.model_copy(update={"is_active": plan.id == plan_id}))

        logger.info("Activated plan {}", plan_id)
        return target.model_copy(update={"is_active": True})

    async def _deactivate_all(self) -> None:
        for plan in await self.list_all_plans():
            if plan.is_active:
                await self._save(plan.model_copy(update={"is_active": False}))
                logger.debug("Deactivated plan {}", plan.id)

    async def _save(self, plan: Plan) -> None:
        await self.file_store.write_file(plan.file_path, self.codec.encode(plan))
