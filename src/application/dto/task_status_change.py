from pydantic import BaseModel

from src.domain.entities.plan import Plan
from src.domain.entities.task import Task
from src.domain.errors import TaskNotFoundError
from src.domain.value_objects.task_status import TaskStatus


class TaskStatusChange(BaseModel, frozen=True):
    plan: Plan
    task_id: str
    previous_status: TaskStatus
    new_status: TaskStatus

    @property
    def task(self) -> Task:
        task = self.plan.find_task(self.task_id)
        if task is None:
            raise TaskNotFoundError(self.plan.id, self.task_id)
        return task
