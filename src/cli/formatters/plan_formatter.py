from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from src.cli.formatters.plan_text import STATUS_ICONS, format_progress
from src.cli.theme import theme
from src.domain.entities.plan import Plan
from src.domain.ports.plan_watch_port import PlanWatchState
from src.domain.services.plan_markdown_codec import DATE_FORMAT


def plans_table(plans: list[Plan]) -> Table:
    table = Table(title="Plans")
    table.add_column("", width=1)
    table.add_column("ID", style=theme.TABLE_ID)
    table.add_column("Name")
    table.add_column("Created", style=theme.DIM)
    table.add_column("Status")
    table.add_column("Progress", justify="right")

    for plan in plans:
        table.add_row(
            Text("●", style=theme.PLAN_ACTIVE) if plan.is_active else "",
            plan.id,
            plan.name[:50],
            plan.created_at.strftime(DATE_FORMAT),
            plan.status,
            format_progress(plan),
        )
    return table


def tasks_table(plan: Plan) -> Table:
    table = Table(show_header=True, box=None, padding=(0, 1))
    table.add_column("", width=1)
    table.add_column("ID", style=theme.TABLE_ID)
    table.add_column("Task")
    table.add_column("Status")

    for task in plan.tasks:
        style = theme.task_status(task.status)
        table.add_row(
            Text(STATUS_ICONS[task.status], style=style),
            task.id,
            Text(task.title, style=style),
            Text(task.status.value, style=style),
        )
    return table


def plan_panel(plan: Plan) -> Panel:
    details = Table(show_header=False, box=None, padding=(0, 1))
    details.add_column("Label", style=theme.TABLE_LABEL)
    details.add_column("Value")
    details.add_row("ID", plan.id)
    details.add_row("Created", plan.created_at.strftime(DATE_FORMAT))
    details.add_row("Status", plan.status)
    details.add_row("Active", "yes" if plan.is_active else "no")
    details.add_row("Progress", format_progress(plan))
    details.add_row("File", str(plan.file_path))

    parts: list[Table | Text] = [details]
    if plan.description:
        parts.append(Text(plan.description, style=theme.DIM_ITALIC))
    parts.append(tasks_table(plan))

    return Panel(
        Group(*parts),
        title=f"[{theme.HEADER}]{plan.name}[/]",
        border_style=theme.BORDER_INFO,
    )


def watch_panel(state: PlanWatchState) -> Panel:
    if state.plan is None:
        return Panel(
            Text("No active plan", style=theme.DIM),
            title="Task Manager",
            subtitle=f"reload #{state.reload_counter}",
            border_style=theme.BORDER_WARNING,
        )
    panel = plan_panel(state.plan)
    panel.subtitle = f"{state.plan.completed_count()} / {state.plan.total_count()} tasks completed · reload #{state.reload_counter}"
    return panel
