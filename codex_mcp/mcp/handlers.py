"""Tool handlers that turn typed invocations into banner text.

Handlers raise :class:`~codex_mcp.core.exceptions.BridgeError` subclasses; the
conversion to ``Error: ...`` text happens once, in
:func:`codex_mcp.mcp.dispatch.call_tool`.
"""

from __future__ import annotations

from pathlib import Path

from ..core.codex_runner import CodexRunner
from ..core.commands import consult_args, history_args, review_args, status_args
from ..core.history import paginate_sessions
from ..core.logging_config import get_logger
from ..schemas.invocation import (
    ConsultArguments,
    HistoryArguments,
    ReviewArguments,
    StatusArguments,
)

logger = get_logger(__name__)

NO_HISTORY_MESSAGE = "No history available or codex --history command not supported."


async def review(arguments: ReviewArguments, runner: CodexRunner) -> str:
    args = review_args(
        arguments.prompt,
        include_project_context=arguments.include_project_context,
        project_doc=Path(runner.settings.project_doc),
    )
    output = await runner.execute(args)
    return f"Codex Review Response:\n\n{output}"


async def consult(arguments: ConsultArguments, runner: CodexRunner) -> str:
    output = await runner.execute(consult_args(arguments.question))
    return f"Codex Consultation:\n\n{output}"


async def status(arguments: StatusArguments, runner: CodexRunner) -> str:
    output = await runner.execute(status_args(runner.settings.status_prompt))
    return f"Project Status from Codex:\n\n{output}"


async def history(arguments: HistoryArguments, runner: CodexRunner) -> str:
    """History is best-effort: any failure becomes a neutral message."""

    try:
        output = await runner.execute(history_args(runner.settings.history_flag))
    except Exception as exc:  # noqa: BLE001 - history is best-effort
        logger.info("codex_history_unavailable", error_type=type(exc).__name__, error=str(exc))
        return NO_HISTORY_MESSAGE

    page = paginate_sessions(output, arguments.limit)
    return (
        f"Recent Codex Sessions (showing {page.shown} of {page.total}):\n\n"
        f"{page.render()}"
    )
