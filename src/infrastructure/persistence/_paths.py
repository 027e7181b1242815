from datetime import datetime
from pathlib import Path

FILE_TIMESTAMP_FORMAT = "%Y%m%d-%H%M%S"


class PlanPathBuilder:
    def __init__(self, plans_dir: Path) -> None:
        self.plans_dir = plans_dir

    def plan_file(self, created_at: datetime, plan_id: str) -> Path:
        """plan-<yyyyMMdd-HHmmss>-<plan id>.md"""
        return self.plans_dir / f"plan-{created_at.strftime(FILE_TIMESTAMP_FORMAT)}-{plan_id}.md"

    def is_plan_file(self, path: Path) -> bool:
        return path.suffix == ".md" and not path.name.startswith(".")
