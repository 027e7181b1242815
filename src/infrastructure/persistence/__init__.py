from src.infrastructure.persistence.local_file_store import LocalFileStore
from src.infrastructure.persistence.markdown_plan_repo import MarkdownPlanRepo, generate_plan_id

__all__ = ["LocalFileStore", "MarkdownPlanRepo", "generate_plan_id"]
