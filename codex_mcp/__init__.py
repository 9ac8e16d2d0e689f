"""MCP server bridging tool calls to the Codex command-line assistant."""

__version__ = "1.0.0"
