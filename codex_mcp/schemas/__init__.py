"""Typed tool invocation schemas."""

from .invocation import (
    CONSULT_TOOL,
    HISTORY_TOOL,
    REVIEW_TOOL,
    STATUS_TOOL,
    TOOL_NAMES,
    ConsultArguments,
    ConsultInvocation,
    HistoryArguments,
    HistoryInvocation,
    ReviewArguments,
    ReviewInvocation,
    StatusArguments,
    StatusInvocation,
    ToolInvocation,
    parse_invocation,
)

__all__ = [
    "CONSULT_TOOL",
    "HISTORY_TOOL",
    "REVIEW_TOOL",
    "STATUS_TOOL",
    "TOOL_NAMES",
    "ConsultArguments",
    "ConsultInvocation",
    "HistoryArguments",
    "HistoryInvocation",
    "ReviewArguments",
    "ReviewInvocation",
    "StatusArguments",
    "StatusInvocation",
    "ToolInvocation",
    "parse_invocation",
]
