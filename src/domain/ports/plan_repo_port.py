from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from src.domain.value_objects.task_status import TaskStatus

if TYPE_CHECKING:
    from src.domain.entities.plan import Plan


class PlanRepoPort(ABC):
    """Port for plan persistence and activation."""

    @abstractmethod
    async def create_plan(self, name: str, description: str, task_titles: list[str]) -> "Plan":
        """Create a new plan, make it the only active one and persist it."""

    @abstractmethod
    async def get_active_plan(self) -> "Plan | None":
        """Return the active plan, or None when there is none."""

    @abstractmethod
    async def get_plan(self, plan_id: str) -> "Plan":
        """Return a plan by ID."""

    @abstractmethod
    async def update_task_status(self, plan_id: str, task_id: str, status: TaskStatus) -> "Plan":
        """Change one task's status and persist the plan."""

    @abstractmethod
    async def list_all_plans(self) -> list["Plan"]:
        """Return every readable plan."""

    @abstractmethod
    async def delete_plan(self, plan_id: str) -> None:
        """Remove a plan's backing file."""

    @abstractmethod
    async def set_active_plan(self, plan_id: str) -> "Plan":
        """Make the given plan the only active one."""
