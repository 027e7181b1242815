from pydantic import BaseModel, field_validator

from src.domain.services.plan_markdown_codec import is_reserved_line, is_single_line


class PlanInput(BaseModel):
    """Input parameters for plan creation."""

    name: str
    description: str = ""
    tasks: list[str]

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        name = v.strip()
        if not name:
            raise ValueError("Plan name must not be empty")
        if not is_single_line(name):
            raise ValueError("Plan name must be a single line")
        return name

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str) -> str:
        for line in v.splitlines():
            if is_reserved_line(line):
                raise ValueError(
                    f"Description must not contain plan headers or fields: {line.strip()!r}"
                )
        return v.strip()

    @field_validator("tasks")
    @classmethod
    def validate_tasks(cls, v: list[str]) -> list[str]:
        """Strip titles and drop blank ones; emptiness is checked by CreatePlan."""
        titles = [title.strip() for title in v if title.strip()]
        for title in titles:
            if not is_single_line(title):
                raise ValueError(f"Task title must be a single line: {title!r}")
        return titles
