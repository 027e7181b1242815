from src.cli.formatters.plan_formatter import plan_panel, plans_table, tasks_table, watch_panel
from src.cli.formatters.plan_text import (
    STATUS_ICONS,
    format_current_plan,
    format_no_active_plan,
    format_plan_created,
    format_plan_list,
    format_progress,
    format_status_change,
    format_task_line,
)

__all__ = [
    "STATUS_ICONS",
    "format_current_plan",
    "format_no_active_plan",
    "format_plan_created",
    "format_plan_list",
    "format_progress",
    "format_status_change",
    "format_task_line",
    "plan_panel",
    "plans_table",
    "tasks_table",
    "watch_panel",
]
