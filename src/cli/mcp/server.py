from loguru import logger
from mcp.server.fastmcp import FastMCP

from src.application.services.plan_board import PlanBoard
from src.cli.mcp.tools import PlanTools
from src.domain.ports.plan_repo_port import PlanRepoPort
from src.infrastructure.config.settings import AppSettings
from src.infrastructure.watching.plan_change_watcher import PlanChangeWatcher

INSTRUCTIONS = (
    "Task plan server. Call get_current_plan before starting work, create_plan to "
    "break a request into tasks, and update_task_status(task_id, status) as each "
    "task moves through pending, in_progress, completed or cancelled. "
    "Plans are stored as markdown files that the user may also edit by hand."
)


def build_server(tools: PlanTools, settings: AppSettings) -> FastMCP:
    """Register every tool on a new FastMCP server."""
    mcp = FastMCP(settings.server_name, instructions=INSTRUCTIONS)

    @mcp.tool()
    def hello(text: str = "") -> str:
        """Return a greeting, with the given text appended in upper case."""
        return tools.hello(text)

    @mcp.tool()
    def echo(text: str) -> str:
        """Return the text unchanged."""
        return tools.echo(text)

    @mcp.tool()
    def get_time() -> str:
        """Return the current local date and time."""
        return tools.get_time()

    @mcp.tool()
    def calculator(a: float, b: float, operation: str) -> str:
        """Apply add, subtract, multiply, divide or power to two numbers."""
        return tools.calculator(a, b, operation)

    @mcp.tool()
    def system_info() -> str:
        """Describe the host operating system and Python runtime."""
        return tools.system_info()

    @mcp.tool()
    async def create_plan(plan_name: str, description: str, tasks: list[str]) -> str:
        """Create a plan from a list of task titles and make it the active plan.

        Args:
            plan_name: Short plan name.
            description: What the plan is meant to achieve.
            tasks: Task titles in execution order.
        """
        return await tools.create_plan(plan_name, description, tasks)

    @mcp.tool()
    async def get_current_plan(include_details: bool = True) -> str:
        """Return the active plan with its tasks and progress."""
        return await tools.get_current_plan(include_details)

    @mcp.tool()
    async def update_task_status(task_id: str, status: str, plan_id: str | None = None) -> str:
        """Set the status of a task in the active plan, or in plan_id when given.

        Args:
            task_id: Task identifier such as task-1.
            status: pending, in_progress, completed or cancelled.
            plan_id: Optional plan identifier; defaults to the active plan.
        """
        return await tools.update_task_status(task_id, status, plan_id)

    @mcp.tool()
    async def list_plans() -> str:
        """List every stored plan; the active one is marked with *."""
        return await tools.list_plans()

    @mcp.tool()
    async def set_active_plan(plan_id: str) -> str:
        """Make the given plan the only active plan."""
        return await tools.set_active_plan(plan_id)

    @mcp.tool()
    async def delete_plan(plan_id: str) -> str:
        """Delete a plan file."""
        return await tools.delete_plan(plan_id)

    return mcp


async def run_server(settings: AppSettings, repo: PlanRepoPort) -> None:
    """Serve over stdio while the plan watcher runs in the background."""
    watcher = PlanChangeWatcher(
        repo,
        settings.plans_dir,
        poll_interval=settings.watch_poll_interval,
        suppression_delay=settings.ui_suppression_delay,
    )
    board = PlanBoard(repo, watcher)
    mcp = build_server(PlanTools(board), settings)

    logger.info(
        "Starting {} v{} (plans: {})",
        settings.server_name,
        settings.server_version,
        settings.plans_dir,
    )
    await watcher.start()
    try:
        await mcp.run_stdio_async()
    finally:
        board.close()
        await watcher.stop()
        logger.info("Server stopped")
