"""Pydantic schemas for tool invocations."""

from __future__ import annotations

from typing import Annotated, Any, Literal, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from ..core.exceptions import InvalidArguments, UnknownTool

REVIEW_TOOL = "codex_review"
CONSULT_TOOL = "codex_consult"
STATUS_TOOL = "codex_status"
HISTORY_TOOL = "codex_history"

TOOL_NAMES: tuple[str, ...] = (REVIEW_TOOL, CONSULT_TOOL, STATUS_TOOL, HISTORY_TOOL)


class _Arguments(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class ReviewArguments(_Arguments):
    prompt: str = Field(..., description="The review request or question for Codex")
    include_project_context: bool = Field(
        True, description="Include CLAUDE.md as project context (default: true)"
    )
    # Reserved; quiet mode is always forced by the runner.
    quiet: bool = True


class ConsultArguments(_Arguments):
    question: str = Field(..., description="The question or topic to discuss with Codex")
    quiet: bool = True


class StatusArguments(_Arguments):
    pass


class HistoryArguments(_Arguments):
    limit: int = Field(5, ge=0, description="Number of recent sessions to show (default: 5)")


class _Invocation(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class ReviewInvocation(_Invocation):
    name: Literal["codex_review"]
    arguments: ReviewArguments


class ConsultInvocation(_Invocation):
    name: Literal["codex_consult"]
    arguments: ConsultArguments


class StatusInvocation(_Invocation):
    name: Literal["codex_status"]
    arguments: StatusArguments = StatusArguments()


class HistoryInvocation(_Invocation):
    name: Literal["codex_history"]
    arguments: HistoryArguments = HistoryArguments()


ToolInvocation = Annotated[
    Union[ReviewInvocation, ConsultInvocation, StatusInvocation, HistoryInvocation],
    Field(discriminator="name"),
]

_INVOCATION_ADAPTER: TypeAdapter[ToolInvocation] = TypeAdapter(ToolInvocation)


def parse_invocation(name: str, arguments: Mapping[str, Any] | None) -> ToolInvocation:
    """Validate a raw ``{name, arguments}`` pair into a typed invocation."""

    if name not in TOOL_NAMES:
        raise UnknownTool(f"Unknown tool: {name}")

    try:
        return _INVOCATION_ADAPTER.validate_python(
            {"name": name, "arguments": dict(arguments or {})}
        )
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        )
        raise InvalidArguments(f"Invalid arguments for {name}: {problems}") from exc
