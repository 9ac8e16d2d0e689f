"""FastMCP tool registrations for the Codex CLI."""

from . import codex, history  # noqa: F401

__all__ = ["codex", "history"]
