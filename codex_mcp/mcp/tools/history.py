"""Session history MCP tool."""

from typing import Annotated

from fastmcp.tools import ToolResult
from pydantic import Field

from ..dispatch import call_tool
from ..middleware import to_tool_result
from ..registry import mcp
from ...schemas.invocation import HISTORY_TOOL


@mcp.tool(name=HISTORY_TOOL)
async def codex_history(
    limit: Annotated[
        int, Field(ge=0, description="Number of recent sessions to show (default: 5)")
    ] = 5,
) -> ToolResult:
    """
    View past Codex consultation sessions.

    Sessions are listed most recent first; the banner reports how many of the
    discovered sessions are shown. History is best-effort: when `codex --history`
    is unavailable a neutral message is returned instead of an error.
    """

    return to_tool_result(await call_tool(HISTORY_TOOL, {"limit": limit}))
