"""Async runner for the external ``codex`` command."""

from __future__ import annotations

import asyncio
import contextlib
import os
import signal
from collections.abc import MutableMapping, Sequence
from functools import lru_cache

from .config import BridgeSettings, get_settings
from .credentials import CredentialResolver
from .exceptions import LaunchFailure, NonZeroExit, OutputTooLarge
from .logging_config import get_logger
from .types import ExternalCommandResult

logger = get_logger(__name__)

_READ_CHUNK_BYTES = 64 * 1024


def _format_limit(limit: int) -> str:
    if limit % (1024 * 1024) == 0:
        return f"{limit // (1024 * 1024)} MiB"
    return f"{limit} bytes"


async def _drain(stream: asyncio.StreamReader, *, name: str, limit: int) -> bytes:
    """Read ``stream`` to EOF, refusing to buffer more than ``limit`` bytes."""

    buffer = bytearray()
    while True:
        chunk = await stream.read(_READ_CHUNK_BYTES)
        if not chunk:
            return bytes(buffer)
        if len(buffer) + len(chunk) > limit:
            raise OutputTooLarge(
                f"Codex {name} exceeded the {_format_limit(limit)} output limit. "
                "There is no smaller-output mode available; narrow the request "
                "(for example, ask about fewer files or a single question) and try again.",
                stream=name,
                limit=limit,
            )
        buffer.extend(chunk)


class CodexRunner:
    """Run ``codex -q <args...>`` to completion and classify the outcome."""

    def __init__(
        self,
        settings: BridgeSettings | None = None,
        credentials: CredentialResolver | None = None,
        environ: MutableMapping[str, str] | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._environ = os.environ if environ is None else environ
        self._credentials = credentials or CredentialResolver(
            self._environ, home_fallback=self._settings.home_fallback
        )

    @property
    def settings(self) -> BridgeSettings:
        return self._settings

    def build_command(self, args: Sequence[str]) -> list[str]:
        """Quiet mode is always forced; caller arguments follow verbatim."""

        return [self._settings.codex_command, self._settings.quiet_flag, *args]

    async def execute(self, args: Sequence[str]) -> str:
        """Return the captured stdout of a successful run."""

        self._credentials.ensure()
        result = await self.run(args)
        return self.classify(result)

    async def run(self, args: Sequence[str]) -> ExternalCommandResult:
        command = self.build_command(args)
        limit = self._settings.max_output_bytes
        logger.debug("codex_exec_start", executable=command[0], argc=len(args))

        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                env=dict(self._environ),
            )
        except OSError as exc:
            logger.warning("codex_launch_failed", executable=command[0], error=str(exc))
            raise LaunchFailure(f"Failed to execute {command[0]}: {exc}") from exc

        readers = (
            asyncio.ensure_future(_drain(process.stdout, name="stdout", limit=limit)),
            asyncio.ensure_future(_drain(process.stderr, name="stderr", limit=limit)),
        )
        try:
            stdout, stderr = await asyncio.gather(*readers)
            returncode = await process.wait()
        except OutputTooLarge as exc:
            logger.warning("codex_output_too_large", stream=exc.stream, limit=exc.limit)
            raise
        finally:
            for reader in readers:
                reader.cancel()
            if process.returncode is None:
                with contextlib.suppress(ProcessLookupError):
                    process.kill()
                await process.wait()

        signal_name = None
        exit_code: int | None = returncode
        if returncode < 0:
            exit_code = None
            try:
                signal_name = signal.Signals(-returncode).name
            except ValueError:
                signal_name = f"SIG{-returncode}"

        logger.debug(
            "codex_exec_finished",
            exit_code=exit_code,
            signal=signal_name,
            stdout_bytes=len(stdout),
            stderr_bytes=len(stderr),
        )
        return ExternalCommandResult(
            exit_code=exit_code,
            signal=signal_name,
            stdout=stdout,
            stderr=stderr,
        )

    @staticmethod
    def classify(result: ExternalCommandResult) -> str:
        if result.exit_code == 0:
            return result.stdout.decode("utf-8", errors="replace")

        detail = result.detail()
        if result.signal is not None:
            raise NonZeroExit(
                f"Codex terminated by signal {result.signal}: {detail}",
                signal=result.signal,
            )
        raise NonZeroExit(
            f"Codex exited with code {result.exit_code}: {detail}",
            exit_code=result.exit_code,
        )


@lru_cache
def get_runner() -> CodexRunner:
    """Process-wide runner bound to the cached settings and ``os.environ``."""

    return CodexRunner()
