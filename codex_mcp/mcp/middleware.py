"""FastMCP middleware rendering rejected tool calls as error envelopes.

Calls that never reach a registered tool (unknown names, arguments rejected by
FastMCP's own schema validation) would otherwise surface as protocol-level
errors.
"""

from __future__ import annotations

from fastmcp.exceptions import NotFoundError, ValidationError
from fastmcp.server.middleware import CallNext, Middleware, MiddlewareContext
from fastmcp.tools import ToolResult

from ..core.logging_config import get_logger
from ..core.types import ToolResponse

logger = get_logger(__name__)


def to_tool_result(response: ToolResponse) -> ToolResult:
    return ToolResult(content=response.text)


class EnvelopeMiddleware(Middleware):
    async def on_call_tool(
        self,
        context: MiddlewareContext,
        call_next: CallNext,
    ) -> ToolResult:
        name = context.message.name
        try:
            return await call_next(context)
        except NotFoundError:
            logger.warning("mcp_unknown_tool", name=name)
            return to_tool_result(ToolResponse.error(f"Unknown tool: {name}"))
        except ValidationError as exc:
            logger.warning("mcp_invalid_arguments", name=name)
            return to_tool_result(ToolResponse.error(f"Invalid arguments for {name}: {exc}"))
