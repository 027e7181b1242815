from src.domain.services.plan_markdown_codec import (
    DATE_FORMAT,
    PlanMarkdownCodec,
    is_reserved_line,
    is_single_line,
)

__all__ = [
    "DATE_FORMAT",
    "PlanMarkdownCodec",
    "is_reserved_line",
    "is_single_line",
]
