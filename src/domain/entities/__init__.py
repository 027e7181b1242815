from src.domain.entities.plan import Plan
from src.domain.entities.task import Task

__all__ = [
    "Plan",
    "Task",
]
