"""CLI theme configuration - all colors in one place.

Colors use Rich markup syntax (e.g., "green", "bold red", "dim italic").
"""

from src.domain.value_objects.task_status import TaskStatus


class Theme:
    """Terminal color theme for the plan server CLI."""

    # -------------------------------------------------------------------------
    # Status colors (for success/error/warning indicators)
    # -------------------------------------------------------------------------
    SUCCESS = "green"
    SUCCESS_BOLD = "bold green"
    ERROR = "red"
    ERROR_BOLD = "bold red"
    WARNING = "yellow"
    INFO = "cyan"

    # -------------------------------------------------------------------------
    # Text styles
    # -------------------------------------------------------------------------
    HEADER = "bold"
    DIM = "grey62"
    DIM_ITALIC = "grey62 italic"

    # -------------------------------------------------------------------------
    # Table columns
    # -------------------------------------------------------------------------
    TABLE_ID = "cyan"
    TABLE_LABEL = "grey62"
    TABLE_VALUE = "bold"

    # -------------------------------------------------------------------------
    # Task status
    # -------------------------------------------------------------------------
    TASK_COMPLETED = "green"
    TASK_IN_PROGRESS = "yellow"
    TASK_PENDING = "grey62"
    TASK_CANCELLED = "red strike"

    # -------------------------------------------------------------------------
    # Plans
    # -------------------------------------------------------------------------
    PLAN_ACTIVE = "bold green"
    PLAN_INACTIVE = "grey62"
    BORDER_INFO = "blue"
    BORDER_WARNING = "yellow"

    def task_status(self, status: TaskStatus) -> str:
        return {
            TaskStatus.COMPLETED: self.TASK_COMPLETED,
            TaskStatus.IN_PROGRESS: self.TASK_IN_PROGRESS,
            TaskStatus.PENDING: self.TASK_PENDING,
            TaskStatus.CANCELLED: self.TASK_CANCELLED,
        }[status]


# Default theme instance - import this in other modules
theme = Theme()
