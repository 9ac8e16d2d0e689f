"""FastMCP server configuration and lifecycle helpers."""

from __future__ import annotations

from typing import Any

from ..core.logging_config import get_logger
from .dispatch import call_tool
from .middleware import EnvelopeMiddleware
from .registry import mcp

# Import tool modules so decorators run at import time.
from . import tools  # noqa: F401

logger = get_logger(__name__)

mcp.add_middleware(EnvelopeMiddleware())

__all__ = ["call_tool", "list_tools", "mcp", "run_stdio"]


async def list_tools() -> list[dict[str, Any]]:
    """Return the static tool catalog as plain dictionaries."""

    tools = await mcp.list_tools()
    catalog = [
        {
            "name": tool.name,
            "description": tool.description or "",
            "inputSchema": tool.parameters or {"type": "object", "properties": {}},
        }
        for tool in tools
    ]
    logger.debug("mcp_tools_listed", count=len(catalog))
    return catalog


def run_stdio() -> None:
    """Serve the registered tools over stdio until the client disconnects."""

    logger.info("codex_mcp_server_running", transport="stdio", server=mcp.name)
    mcp.run(transport="stdio", show_banner=False)
