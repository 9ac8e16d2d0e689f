"""Segmentation of ``codex --history`` output into session records."""

from __future__ import annotations

from dataclasses import dataclass

SESSION_PREFIX = "Session:"
SESSION_SEPARATOR = "\n---\n"


def split_sessions(text: str) -> list[str]:
    """Split history text into records, each starting at a ``Session:`` line.

    Lines keep their trailing newline. Text before the first header, if any,
    forms its own leading record.
    """

    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()

    sessions: list[str] = []
    current = ""
    for line in lines:
        if line.startswith(SESSION_PREFIX) and current:
            sessions.append(current)
            current = ""
        current += line + "\n"

    if current:
        sessions.append(current)
    return sessions


@dataclass(frozen=True, slots=True)
class HistoryPage:
    sessions: tuple[str, ...]
    total: int

    @property
    def shown(self) -> int:
        return len(self.sessions)

    def render(self) -> str:
        return SESSION_SEPARATOR.join(self.sessions)


def paginate_sessions(text: str, limit: int) -> HistoryPage:
    """Keep the first ``limit`` sessions in emitted (most-recent-first) order."""

    sessions = split_sessions(text)
    return HistoryPage(sessions=tuple(sessions[:limit]), total=len(sessions))
