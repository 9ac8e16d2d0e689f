"""Tool-call error boundary shared by FastMCP tools and direct callers."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, Mapping

from ..core.codex_runner import CodexRunner, get_runner
from ..core.exceptions import BridgeError
from ..core.logging_config import get_logger
from ..core.types import ToolResponse
from ..schemas.invocation import (
    CONSULT_TOOL,
    HISTORY_TOOL,
    REVIEW_TOOL,
    STATUS_TOOL,
    parse_invocation,
)
from . import handlers

logger = get_logger(__name__)

Handler = Callable[[Any, CodexRunner], Awaitable[str]]

_HANDLERS: dict[str, Handler] = {
    REVIEW_TOOL: handlers.review,
    CONSULT_TOOL: handlers.consult,
    STATUS_TOOL: handlers.status,
    HISTORY_TOOL: handlers.history,
}


async def call_tool(
    name: str,
    arguments: Mapping[str, Any] | None = None,
    *,
    runner: CodexRunner | None = None,
) -> ToolResponse:
    """Execute a tool by name; every outcome is a renderable envelope."""

    logger.debug("mcp_tool_call", name=name, fields=sorted((arguments or {}).keys()))
    try:
        invocation = parse_invocation(name, arguments)
        text = await _HANDLERS[invocation.name](invocation.arguments, runner or get_runner())
    except BridgeError as exc:
        logger.warning("mcp_tool_failed", name=name, error_type=type(exc).__name__)
        return ToolResponse.error(str(exc))
    except Exception as exc:  # noqa: BLE001 - nothing escapes as a protocol fault
        logger.exception("mcp_tool_crashed", name=name)
        return ToolResponse.error(str(exc))

    return ToolResponse.text_response(text)
