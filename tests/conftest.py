from datetime import datetime
from pathlib import Path

import pytest

from src.domain.entities.plan import Plan
from src.domain.entities.task import Task
from src.domain.value_objects.task_status import TaskStatus
from src.infrastructure.persistence.local_file_store import LocalFileStore
from src.infrastructure.persistence.markdown_plan_repo import MarkdownPlanRepo


@pytest.fixture
def plans_dir(tmp_path: Path) -> Path:
    return tmp_path / ".cursor" / "plans"


@pytest.fixture
def repo(plans_dir: Path) -> MarkdownPlanRepo:
    return MarkdownPlanRepo(LocalFileStore(), plans_dir)


@pytest.fixture
def sample_plan(tmp_path: Path) -> Plan:
    return Plan(
        id="plan-abc12345",
        name="Feature Implementation",
        description="Build the feature",
        created_at=datetime(2025, 12, 16, 15, 30, 0),
        is_active=True,
        tasks=[
            Task(id="task-1", title="Create domain models", status=TaskStatus.COMPLETED, order=1),
            Task(id="task-2", title="Implement services", status=TaskStatus.IN_PROGRESS, order=2),
            Task(id="task-3", title="Write tests", order=3),
        ],
        file_path=tmp_path / "plan-20251216-153000-plan-abc12345.md",
    )
