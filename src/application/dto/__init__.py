from src.application.dto.plan_input import PlanInput
from src.application.dto.task_status_change import TaskStatusChange

__all__ = ["PlanInput", "TaskStatusChange"]
