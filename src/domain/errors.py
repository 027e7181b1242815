"""Error kinds raised by the plan subsystem.

Every error derives from ``PlanError`` so the outer surfaces (CLI, tool
server) can render any failure with a single handler.
"""

from enum import Enum
from pathlib import Path


class PlanError(Exception):
    """Base class for plan subsystem failures."""


class NotFoundError(PlanError):
    pass


class PlanNotFoundError(NotFoundError):
    def __init__(self, plan_id: str) -> None:
        super().__init__(f"Plan with ID {plan_id} not found")
        self.plan_id = plan_id


class TaskNotFoundError(NotFoundError):
    def __init__(self, plan_id: str, task_id: str) -> None:
        super().__init__(f"Task with ID {task_id} not found in plan {plan_id}")
        self.plan_id = plan_id
        self.task_id = task_id


class FileMissingError(NotFoundError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"File not found: {path}")
        self.path = path


class NoActivePlanError(NotFoundError):
    def __init__(self) -> None:
        super().__init__("No active plan. Create one with create_plan first.")


class ParseErrorKind(str, Enum):
    MISSING_FIELD = "missing_field"
    MISSING_SECTION = "missing_section"
    NO_TASKS = "no_tasks"
    BAD_DATE = "bad_date"


class PlanParseError(PlanError):
    def __init__(self, kind: ParseErrorKind, detail: str) -> None:
        super().__init__(f"Failed to parse plan from markdown: {detail}")
        self.kind = kind
        self.detail = detail


class StorageError(PlanError):
    """Read/write/list/delete failure of the underlying storage."""

    def __init__(self, operation: str, path: Path, reason: str) -> None:
        super().__init__(f"Failed to {operation} {path}: {reason}")
        self.operation = operation
        self.path = path


class EmptyPlanError(PlanError, ValueError):
    def __init__(self) -> None:
        super().__init__("A plan must contain at least one task")
