from enum import Enum


class TaskStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @property
    def checkbox(self) -> str:
        """Symbol written between the brackets of a markdown task line."""
        return _CHECKBOX_BY_STATUS[self]

    @classmethod
    def from_checkbox(cls, symbol: str) -> "TaskStatus":
        return _STATUS_BY_CHECKBOX.get(symbol.strip().lower(), cls.PENDING)

    @classmethod
    def from_value(cls, value: str) -> "TaskStatus | None":
        try:
            return cls(value.strip())
        except ValueError:
            return None

    @classmethod
    def parse(cls, value: str) -> "TaskStatus":
        """Parse user input leniently ("In Progress", "in-progress", ...)."""
        normalized = value.strip().lower().replace("-", "_").replace(" ", "_")
        status = cls.from_value(normalized)
        if status is None:
            allowed = ", ".join(s.value for s in cls)
            raise ValueError(f"Unknown task status '{value}' (expected one of: {allowed})")
        return status


_CHECKBOX_BY_STATUS = {
    TaskStatus.COMPLETED: "x",
    TaskStatus.PENDING: " ",
    TaskStatus.IN_PROGRESS: "→",
    TaskStatus.CANCELLED: "c",
}

_STATUS_BY_CHECKBOX = {
    "x": TaskStatus.COMPLETED,
    "→": TaskStatus.IN_PROGRESS,
    "c": TaskStatus.CANCELLED,
}
