"""Custom exception hierarchy for the Codex bridge."""


class BridgeError(Exception):
    """Base exception for bridge-level issues."""


class ConfigurationError(BridgeError):
    """Raised when configuration is invalid or missing."""


class CredentialMissing(ConfigurationError):
    """Raised when OPENAI_API_KEY cannot be found in any source."""


class ExternalCommandError(BridgeError):
    """Raised when the external assistant cannot produce a result."""


class LaunchFailure(ExternalCommandError):
    """Raised when the external command cannot be started at all."""


class NonZeroExit(ExternalCommandError):
    """Raised when the external command exits unsuccessfully."""

    def __init__(
        self,
        message: str,
        *,
        exit_code: int | None = None,
        signal: str | None = None,
    ) -> None:
        super().__init__(message)
        self.exit_code = exit_code
        self.signal = signal


class OutputTooLarge(ExternalCommandError):
    """Raised when a captured stream exceeds the configured buffer limit."""

    def __init__(self, message: str, *, stream: str, limit: int) -> None:
        super().__init__(message)
        self.stream = stream
        self.limit = limit


class UnknownTool(BridgeError):
    """Raised when an invocation names a tool outside the catalog."""


class InvalidArguments(BridgeError):
    """Raised when tool arguments fail validation."""
