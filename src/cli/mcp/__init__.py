"""MCP server components."""

from src.cli.mcp.server import build_server, run_server
from src.cli.mcp.tools import PlanTools

__all__ = ["PlanTools", "build_server", "run_server"]
