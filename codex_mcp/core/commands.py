"""Argument vectors for each Codex tool.

These are pure functions of the validated arguments; the quiet flag is added
later by :class:`~codex_mcp.core.codex_runner.CodexRunner`.
"""

from __future__ import annotations

from pathlib import Path

PROJECT_DOC_FLAG = "--project-doc"


def review_args(prompt: str, *, include_project_context: bool, project_doc: Path) -> list[str]:
    args: list[str] = []
    if include_project_context and project_doc.exists():
        args.extend([PROJECT_DOC_FLAG, str(project_doc)])
    args.append(prompt)
    return args


def consult_args(question: str) -> list[str]:
    return [question]


def status_args(status_prompt: str) -> list[str]:
    return [status_prompt]


def history_args(history_flag: str) -> list[str]:
    return [history_flag]
