"""Shared FastMCP instance that tool modules register against."""

from fastmcp import FastMCP

mcp = FastMCP(
    name="mcp-codex-server",
    version="1.0.0",
    instructions="Review, consultation, status and history tools backed by the Codex CLI.",
)
