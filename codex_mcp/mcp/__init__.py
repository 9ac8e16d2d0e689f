"""MCP server wiring: registry, tool registrations and the error boundary."""
