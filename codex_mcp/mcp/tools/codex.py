"""Review, consultation and status MCP tools."""

from typing import Annotated

from fastmcp.tools import ToolResult
from pydantic import Field

from ..dispatch import call_tool
from ..middleware import to_tool_result
from ..registry import mcp
from ...schemas.invocation import CONSULT_TOOL, REVIEW_TOOL, STATUS_TOOL


@mcp.tool(name=REVIEW_TOOL)
async def codex_review(
    prompt: Annotated[str, Field(description="The review request or question for Codex")],
    include_project_context: Annotated[
        bool, Field(description="Include CLAUDE.md as project context (default: true)")
    ] = True,
    quiet: Annotated[
        bool, Field(description="Reserved; Codex always runs in quiet mode")
    ] = True,
) -> ToolResult:
    """
    Request a code review or evaluation from Codex.

    Use this for reviewing changes, plans, or getting peer review on implementations.
    """

    response = await call_tool(
        REVIEW_TOOL,
        {
            "prompt": prompt,
            "include_project_context": include_project_context,
            "quiet": quiet,
        },
    )
    return to_tool_result(response)


@mcp.tool(name=CONSULT_TOOL)
async def codex_consult(
    question: Annotated[str, Field(description="The question or topic to discuss with Codex")],
    quiet: Annotated[
        bool, Field(description="Reserved; Codex always runs in quiet mode")
    ] = True,
) -> ToolResult:
    """
    Consult with Codex about implementation decisions, best practices, or get guidance
    on how to approach a problem.
    """

    response = await call_tool(CONSULT_TOOL, {"question": question, "quiet": quiet})
    return to_tool_result(response)


@mcp.tool(name=STATUS_TOOL)
async def codex_status() -> ToolResult:
    """Get a summary of the current project state from Codex."""

    return to_tool_result(await call_tool(STATUS_TOOL, {}))
