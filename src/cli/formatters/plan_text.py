"""Plain-text plan renderings returned by the tool server."""

from src.application.dto.task_status_change import TaskStatusChange
from src.domain.entities.plan import Plan
from src.domain.entities.task import Task
from src.domain.services.plan_markdown_codec import DATE_FORMAT
from src.domain.value_objects.task_status import TaskStatus

STATUS_ICONS: dict[TaskStatus, str] = {
    TaskStatus.COMPLETED: "✓",
    TaskStatus.IN_PROGRESS: "→",
    TaskStatus.CANCELLED: "✗",
    TaskStatus.PENDING: " ",
}


def format_progress(plan: Plan) -> str:
    return f"{int(plan.progress() * 100)}% ({plan.completed_count()}/{plan.total_count()})"


def format_task_line(task: Task, with_status: bool = True) -> str:
    line = f"[{task.status.checkbox}] {task.id}: {task.title}"
    return f"{line} ({task.status.value})" if with_status else line


def format_plan_created(plan: Plan) -> str:
    tasks = "\n".join(f"  - {format_task_line(task)}" for task in plan.tasks)
    return "\n".join(
        [
            "Plan created successfully!",
            "",
            f"ID: {plan.id}",
            f"Name: {plan.name}",
            f"Description: {plan.description}",
            f"Created: {plan.created_at.strftime(DATE_FORMAT)}",
            f"Status: {plan.status}",
            f"File: {plan.file_path}",
            "",
            f"Tasks ({plan.total_count()}):",
            tasks,
            "",
            f"Progress: {format_progress(plan)}",
        ]
    )


def format_no_active_plan() -> str:
    return "\n".join(
        [
            "No active plan.",
            "",
            "Create a new plan with create_plan:",
            "- plan_name: plan name",
            "- description: plan description",
            "- tasks: list of task titles",
        ]
    )


def format_current_plan(plan: Plan, include_details: bool = True) -> str:
    lines = ["Current active plan", "", f"ID: {plan.id}", f"Name: {plan.name}"]
    lines.append(f"Description: {plan.description}")
    if include_details:
        lines += [
            f"Created: {plan.created_at.strftime(DATE_FORMAT)}",
            f"Status: {plan.status}",
            f"File: {plan.file_path}",
        ]
    lines += ["", f"Progress: {format_progress(plan)} completed", "", "Tasks:"]

    for task in plan.tasks:
        if include_details:
            lines.append(f"  {STATUS_ICONS[task.status]} {format_task_line(task)}")
        else:
            lines.append(f"  {format_task_line(task, with_status=False)}")

    in_progress = [task for task in plan.tasks if task.is_in_progress()]
    if include_details and in_progress:
        lines += ["", "Tasks in progress:"]
        lines += [f"  → {task.id}: {task.title}" for task in in_progress]

    if include_details:
        lines += [
            "",
            "To update a task status use:",
            'update_task_status(task_id="<task id>", status="<new status>")',
        ]
    return "\n".join(lines)


def format_status_change(change: TaskStatusChange) -> str:
    plan = change.plan
    tasks = []
    for task in plan.tasks:
        marker = "→" if task.id == change.task_id else " "
        tasks.append(f"{marker} - {format_task_line(task)}")

    return "\n".join(
        [
            "Task status updated successfully!",
            "",
            f"Plan: {plan.name}",
            f"Task: {change.task.title}",
            f"Previous status: {change.previous_status.value}",
            f"New status: {change.new_status.value}",
            "",
            "All tasks:",
            *tasks,
            "",
            f"Progress: {format_progress(plan)}",
        ]
    )


def format_plan_list(plans: list[Plan]) -> str:
    if not plans:
        return "No plans found."
    lines = [f"Plans ({len(plans)}):"]
    for plan in plans:
        marker = "*" if plan.is_active else " "
        lines.append(
            f"{marker} {plan.id}: {plan.name} [{plan.status}] {format_progress(plan)}"
        )
    return "\n".join(lines)
