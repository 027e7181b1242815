from pydantic import BaseModel

from src.domain.value_objects.task_status import TaskStatus


class Task(BaseModel, frozen=True):
    id: str
    title: str
    status: TaskStatus = TaskStatus.PENDING
    order: int

    def is_completed(self) -> bool:
        return self.status == TaskStatus.COMPLETED

    def is_pending(self) -> bool:
        return self.status == TaskStatus.PENDING

    def is_in_progress(self) -> bool:
        return self.status == TaskStatus.IN_PROGRESS

    def is_cancelled(self) -> bool:
        return self.status == TaskStatus.CANCELLED

    def with_status(self, status: TaskStatus) -> "Task":
        return self.model_copy(update={"status": status})
