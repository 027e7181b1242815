from src.domain.value_objects.plan_file_event import PlanFileEvent, PlanFileEventKind
from src.domain.value_objects.plan_status import (
    PLAN_STATUS_COMPLETED,
    PLAN_STATUS_IN_PROGRESS,
)
from src.domain.value_objects.task_status import TaskStatus

__all__ = [
    "PLAN_STATUS_COMPLETED",
    "PLAN_STATUS_IN_PROGRESS",
    "PlanFileEvent",
    "PlanFileEventKind",
    "TaskStatus",
]
