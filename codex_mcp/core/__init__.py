"""Core infrastructure: configuration, logging, credentials and the Codex runner."""

from .codex_runner import CodexRunner, get_runner
from .config import BridgeSettings, get_settings
from .credentials import CredentialResolver
from .logging_config import configure_logging, get_logger

__all__ = [
    "BridgeSettings",
    "CodexRunner",
    "CredentialResolver",
    "configure_logging",
    "get_logger",
    "get_runner",
    "get_settings",
]
