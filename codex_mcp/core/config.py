"""Configuration management for the Codex MCP bridge."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# 只读取运行目录下的 .env
_ENV_FILE_CANDIDATES: tuple[str, ...] = (".env",)

MAX_OUTPUT_BYTES = 10 * 1024 * 1024


class BridgeSettings(BaseSettings):
    """Centralised configuration derived from environment variables."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_file: str | None = Field(
        None,
        description="日志文件路径，留空时只输出到 stderr",
    )

    codex_command: str = Field("codex", description="External assistant executable")
    quiet_flag: str = Field("-q", description="Flag forcing non-interactive output")
    max_output_bytes: int = Field(
        MAX_OUTPUT_BYTES,
        gt=0,
        description="Per-stream capture limit for the external command",
    )

    project_doc: str = Field("CLAUDE.md", description="Project documentation passed to reviews")
    status_prompt: str = Field(
        "summarize the current state of the project",
        description="Canned request used by the status tool",
    )
    history_flag: str = Field("--history", description="Flag requesting the history log")

    home_fallback: str = Field(
        "/root",
        description="Home directory used for the credential fallback when HOME is unset",
    )

    model_config = SettingsConfigDict(
        env_prefix="CODEX_MCP_",
        env_file=_ENV_FILE_CANDIDATES,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> BridgeSettings:
    """Return a cached BridgeSettings instance."""

    return BridgeSettings()


def resolved_env_file() -> str | None:
    """Return the first readable .env file from the candidate list."""

    for candidate in _ENV_FILE_CANDIDATES:
        path = Path(candidate).expanduser()
        if path.is_file():
            return str(path)
    return None


def env_file_candidates() -> tuple[str, ...]:
    """Expose configured env file search order for diagnostics."""

    return _ENV_FILE_CANDIDATES
