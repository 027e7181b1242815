"""Tool handlers behind the MCP server.

Every handler returns the human-readable text sent back to the client.
Domain and validation failures become ``ToolError`` so the client receives
an error result instead of a crashed server.
"""

from loguru import logger
from mcp.server.fastmcp.exceptions import ToolError

from src.application.services import utility_tools
from src.application.services.plan_board import PlanBoard
from src.cli.formatters.plan_text import (
    format_current_plan,
    format_no_active_plan,
    format_plan_created,
    format_plan_list,
    format_status_change,
)
from src.domain.errors import PlanError


class PlanTools:
    def __init__(self, board: PlanBoard) -> None:
        self.board = board

    def hello(self, text: str = "") -> str:
        return utility_tools.hello(text)

    def echo(self, text: str) -> str:
        return utility_tools.echo(text)

    def get_time(self) -> str:
        return utility_tools.current_time()

    def calculator(self, a: float, b: float, operation: str) -> str:
        try:
            return utility_tools.format_calculation(a, b, operation)
        except ValueError as e:
            raise ToolError(f"Calculation error: {e}") from e

    def system_info(self) -> str:
        return utility_tools.system_info()

    async def create_plan(self, plan_name: str, description: str, tasks: list[str]) -> str:
        logger.info("Tool create_plan: '{}' with {} tasks", plan_name, len(tasks))
        try:
            plan = await self.board.create_plan(plan_name, description, tasks)
        except (PlanError, ValueError) as e:
            raise ToolError(f"Error creating plan: {e}") from e
        return format_plan_created(plan)

    async def get_current_plan(self, include_details: bool = True) -> str:
        try:
            plan = await self.board.refresh()
        except PlanError as e:
            raise ToolError(f"Error getting plan: {e}") from e
        if plan is None:
            return format_no_active_plan()
        return format_current_plan(plan, include_details)

    async def update_task_status(
        self, task_id: str, status: str, plan_id: str | None = None
    ) -> str:
        logger.info("Tool update_task_status: {} -> {}", task_id, status)
        try:
            change = await self.board.update_task_status(task_id, status, plan_id)
        except (PlanError, ValueError) as e:
            raise ToolError(f"Error updating task status: {e}") from e
        return format_status_change(change)

    async def list_plans(self) -> str:
        try:
            await self.board.refresh()
        except PlanError as e:
            raise ToolError(f"Error listing plans: {e}") from e
        return format_plan_list(self.board.all_plans)

    async def set_active_plan(self, plan_id: str) -> str:
        try:
            plan = await self.board.set_active_plan(plan_id)
        except PlanError as e:
            raise ToolError(f"Error activating plan: {e}") from e
        return f"Plan {plan.id} ({plan.name}) is now active."

    async def delete_plan(self, plan_id: str) -> str:
        try:
            await self.board.delete_plan(plan_id)
        except PlanError as e:
            raise ToolError(f"Error deleting plan: {e}") from e
        return f"Plan {plan_id} deleted."
