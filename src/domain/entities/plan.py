from datetime import datetime
from pathlib import Path

from pydantic import BaseModel

from src.domain.entities.task import Task
from src.domain.value_objects.plan_status import PLAN_STATUS_IN_PROGRESS


class Plan(BaseModel, frozen=True):
    """A named, timestamped list of tasks backed by one markdown file.

    At most one plan in a plans directory is expected to be active; the
    repository maintains that, the model does not.
    """

    id: str
    name: str
    description: str
    created_at: datetime
    status: str = PLAN_STATUS_IN_PROGRESS
    is_active: bool = False
    tasks: list[Task]
    file_path: Path

    def completed_count(self) -> int:
        return sum(1 for task in self.tasks if task.is_completed())

    def total_count(self) -> int:
        return len(self.tasks)

    def progress(self) -> float:
        if not self.tasks:
            return 0.0
        return self.completed_count() / self.total_count()

    def has_in_progress_tasks(self) -> bool:
        return any(task.is_in_progress() for task in self.tasks)

    def is_completed(self) -> bool:
        return bool(self.tasks) and all(task.is_completed() for task in self.tasks)

    def find_task(self, task_id: str) -> Task | None:
        return next((task for task in self.tasks if task.id == task_id), None)
