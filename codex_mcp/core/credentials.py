"""OPENAI_API_KEY resolution for the external assistant.

Lookup order is environment, then ``<cwd>/.env``, then ``<home>/.env``. The
first value found is written back into the environment mapping, so the files are
read at most once per process.
"""

from __future__ import annotations

import os
from collections.abc import MutableMapping
from pathlib import Path

from dotenv import dotenv_values
from pydantic import SecretStr

from .config import get_settings
from .exceptions import CredentialMissing
from .logging_config import get_logger

logger = get_logger(__name__)

API_KEY_NAME = "OPENAI_API_KEY"
ENV_FILE_NAME = ".env"


def read_env_value(path: Path, key: str) -> str | None:
    """Return the trimmed value of ``key`` from a dotenv file, if present and non-empty."""

    if not path.is_file():
        return None
    try:
        values = dotenv_values(path, interpolate=False, encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("env_file_unreadable", path=str(path), error=str(exc))
        return None

    value = (values.get(key) or "").strip()
    return value or None


class CredentialResolver:
    """Locate the API key and memoize it into ``environ``."""

    def __init__(
        self,
        environ: MutableMapping[str, str] | None = None,
        *,
        cwd: Path | None = None,
        home_fallback: str | None = None,
        key: str = API_KEY_NAME,
    ) -> None:
        self._environ = os.environ if environ is None else environ
        self._cwd = cwd
        self._home_fallback = home_fallback or get_settings().home_fallback
        self._key = key

    @property
    def environ(self) -> MutableMapping[str, str]:
        return self._environ

    def candidate_files(self) -> tuple[Path, Path]:
        cwd = self._cwd or Path.cwd()
        home = Path(self._environ.get("HOME") or self._home_fallback)
        return cwd / ENV_FILE_NAME, home / ENV_FILE_NAME

    def ensure(self) -> SecretStr:
        """Return the credential, raising CredentialMissing when no source has it."""

        existing = self._environ.get(self._key)
        if existing:
            return SecretStr(existing)

        candidates = self.candidate_files()
        for path in candidates:
            value = read_env_value(path, self._key)
            if value is None:
                continue
            self._environ[self._key] = value
            logger.info("credential_loaded", key=self._key, source=str(path))
            return SecretStr(value)

        checked = " or ".join(str(path) for path in candidates)
        raise CredentialMissing(
            f"{self._key} not found. Please set it in your environment or in {checked}."
        )
