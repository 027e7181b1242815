from src.application.services.plan_board import PlanBoard
from src.application.use_cases.create_plan import CreatePlan
from src.application.use_cases.update_task_status import UpdateTaskStatus

__all__ = [
    "CreatePlan",
    "PlanBoard",
    "UpdateTaskStatus",
]
