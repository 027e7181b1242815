"""Markdown representation of a plan.

Layout written by ``encode`` and expected by ``decode``::

    # Plan: Feature Implementation

    **Created:** 2025-12-16 15:30:00
    **ID:** plan-abc12345
    **Status:** В работе
    **Active:** true

    ## Description
    Short description of the plan and its goals.

    ## Tasks
    - [ ] task-1: Create domain models (pending)
    - [x] task-2: Implement services (completed)

The status in parentheses is authoritative; the checkbox is a visual hint
used only when the parentheses are missing or unrecognised.
"""

import re
from datetime import datetime
from pathlib import Path

from src.domain.entities.plan import Plan
from src.domain.entities.task import Task
from src.domain.errors import ParseErrorKind, PlanParseError
from src.domain.value_objects.task_status import TaskStatus

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_TITLE_RE = re.compile(r"^#\s+Plan:\s+(.+)$")
_CREATED_RE = re.compile(r"^\*\*Created:\*\*\s+(.+)$")
_ID_RE = re.compile(r"^\*\*ID:\*\*\s+(.+)$")
_STATUS_RE = re.compile(r"^\*\*Status:\*\*\s+(.+)$")
_ACTIVE_RE = re.compile(r"^\*\*Active:\*\*\s+(.+)$")
_DESCRIPTION_HEADER_RE = re.compile(r"^##\s+Description$")
_TASKS_HEADER_RE = re.compile(r"^##\s+Tasks$")
_TASK_RE = re.compile(r"^-\s+\[(.+?)\]\s+([^:]+):\s+(.+?)(?:\s+\(([^)]+)\))?$")

# Header and field lines refused in user-supplied descriptions
_RESERVED_LINE_PATTERNS = (
    _TITLE_RE,
    _CREATED_RE,
    _ID_RE,
    _STATUS_RE,
    _ACTIVE_RE,
    _DESCRIPTION_HEADER_RE,
    _TASKS_HEADER_RE,
)


def is_single_line(text: str) -> bool:
    return "".join(text.splitlines()) == text


def is_reserved_line(line: str) -> bool:
    """True if ``line`` would be parsed as a plan header, field or section."""
    stripped = line.strip()
    return any(pattern.match(stripped) for pattern in _RESERVED_LINE_PATTERNS)


class PlanMarkdownCodec:
    def encode(self, plan: Plan) -> str:
        """Render a plan as markdown.

        Raises:
            ValueError: the plan holds text that would not decode back to
                the same plan (a multi-line name or task title, or a
                ``## Tasks`` heading inside the description).
        """
        self._check_encodable(plan)
        lines = [
            f"# Plan: {plan.name}",
            "",
            f"**Created:** {plan.created_at.strftime(DATE_FORMAT)}",
            f"**ID:** {plan.id}",
            f"**Status:** {plan.status}",
            f"**Active:** {'true' if plan.is_active else 'false'}",
            "",
            "## Description",
            plan.description,
            "",
            "## Tasks",
        ]
        # Stored order, not sorted by Task.order
        for task in plan.tasks:
            lines.append(
                f"- [{task.status.checkbox}] {task.id}: {task.title} ({task.status.value})"
            )
        return "\n".join(lines) + "\n"

    def _check_encodable(self, plan: Plan) -> None:
        if not is_single_line(plan.name):
            raise ValueError("Plan name must be a single line")
        for task in plan.tasks:
            if not is_single_line(task.title) or not is_single_line(task.id):
                raise ValueError(f"Task {task.id!r} must have a single-line id and title")
        # Earlier headers and fields win on decode; only a Tasks heading
        # inside the description changes what is read back
        for line in plan.description.splitlines():
            if _TASKS_HEADER_RE.match(line.strip()):
                raise ValueError(f"Description line is reserved for plan structure: {line.strip()!r}")

    def decode(self, content: str, file_path: Path) -> Plan:
        """Parse markdown into a Plan.

        Raises:
            PlanParseError: a mandatory field or section is missing, the
                creation date is malformed, or no task line is found.
        """
        lines = [line.strip() for line in content.splitlines()]

        name = self._required_field(lines, _TITLE_RE, "Plan title")
        created_raw = self._required_field(lines, _CREATED_RE, "Created date")
        plan_id = self._required_field(lines, _ID_RE, "Plan ID")
        status = self._required_field(lines, _STATUS_RE, "Plan status")
        active_raw = self._optional_field(lines, _ACTIVE_RE)

        try:
            created_at = datetime.strptime(created_raw, DATE_FORMAT)
        except ValueError as e:
            raise PlanParseError(
                ParseErrorKind.BAD_DATE, f"Invalid date format: {created_raw}"
            ) from e

        description_index = self._section_index(lines, _DESCRIPTION_HEADER_RE, "Description")
        tasks_index = self._section_index(lines, _TASKS_HEADER_RE, "Tasks")

        description = "\n".join(
            line for line in lines[description_index + 1 : tasks_index] if line
        ).strip()
        tasks = self._parse_tasks(lines[tasks_index + 1 :])

        return Plan(
            id=plan_id,
            name=name,
            description=description,
            created_at=created_at,
            status=status,
            # Files written before the Active line existed are inactive
            is_active=active_raw is not None and active_raw.lower() == "true",
            tasks=tasks,
            file_path=file_path,
        )

    def _required_field(self, lines: list[str], pattern: re.Pattern[str], label: str) -> str:
        value = self._optional_field(lines, pattern)
        if value is None:
            raise PlanParseError(ParseErrorKind.MISSING_FIELD, f"{label} not found")
        return value

    def _optional_field(self, lines: list[str], pattern: re.Pattern[str]) -> str | None:
        for line in lines:
            match = pattern.match(line)
            if match:
                return match.group(1).strip()
        return None

    def _section_index(self, lines: list[str], pattern: re.Pattern[str], label: str) -> int:
        for index, line in enumerate(lines):
            if pattern.match(line):
                return index
        raise PlanParseError(ParseErrorKind.MISSING_SECTION, f"{label} section not found")

    def _parse_tasks(self, lines: list[str]) -> list[Task]:
        tasks: list[Task] = []
        for line in lines:
            match = _TASK_RE.match(line)
            if not match:
                continue
            checkbox, task_id, title, status_raw = match.groups()
            status = TaskStatus.from_value(status_raw) if status_raw else None
            if status is None:
                status = TaskStatus.from_checkbox(checkbox)
                if status_raw:
                    # Not a status, just a parenthesised part of the title
                    title = f"{title} ({status_raw})"
            tasks.append(
                Task(
                    id=task_id.strip(),
                    title=title.strip(),
                    status=status,
                    order=len(tasks) + 1,
                )
            )

        if not tasks:
            raise PlanParseError(ParseErrorKind.NO_TASKS, "No tasks found in plan")
        return tasks
