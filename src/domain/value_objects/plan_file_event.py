from enum import Enum
from pathlib import Path

from pydantic import BaseModel


class PlanFileEventKind(str, Enum):
    CREATED = "created"
    MODIFIED = "modified"
    DELETED = "deleted"


class PlanFileEvent(BaseModel, frozen=True):
    kind: PlanFileEventKind
    path: Path

    @property
    def is_markdown(self) -> bool:
        return self.path.suffix == ".md"
