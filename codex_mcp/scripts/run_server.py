"""Run the Codex MCP server on stdio.

Intended to be launched by an MCP client (e.g. as the `codex-mcp-server`
console script); stdout is reserved for protocol messages.
"""

from __future__ import annotations


def main() -> None:
    from codex_mcp.core.config import get_settings
    from codex_mcp.core.logging_config import configure_logging, get_logger
    from codex_mcp.mcp.server import run_stdio

    configure_logging()
    settings = get_settings()
    get_logger(__name__).info(
        "codex_mcp_startup",
        codex_command=settings.codex_command,
        log_level=settings.log_level,
        max_output_bytes=settings.max_output_bytes,
    )
    run_stdio()


if __name__ == "__main__":
    main()
