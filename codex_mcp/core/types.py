"""Shared type definitions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal


@dataclass(slots=True)
class ExternalCommandResult:
    """Raw outcome of one external command run, discarded after classification."""

    exit_code: int | None
    signal: str | None
    stdout: bytes = b""
    stderr: bytes = b""

    def detail(self) -> str:
        """Diagnostic text for failures: stderr when present, stdout otherwise."""

        stream = self.stderr if self.stderr.strip() else self.stdout
        return stream.decode("utf-8", errors="replace").strip()


@dataclass(frozen=True, slots=True)
class TextContent:
    text: str
    type: Literal["text"] = "text"


@dataclass(frozen=True, slots=True)
class ToolResponse:
    """Uniform envelope returned for every tool call, errors included."""

    content: tuple[TextContent, ...] = field(default_factory=tuple)

    @classmethod
    def text_response(cls, text: str) -> ToolResponse:
        return cls(content=(TextContent(text=text),))

    @classmethod
    def error(cls, message: str) -> ToolResponse:
        return cls.text_response(f"Error: {message}")

    @property
    def text(self) -> str:
        return "".join(block.text for block in self.content)

    def to_dict(self) -> dict[str, list[dict[str, str]]]:
        return {"content": [{"type": block.type, "text": block.text} for block in self.content]}
