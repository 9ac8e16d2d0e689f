import pytest

from codex_mcp.core.config import (
    MAX_OUTPUT_BYTES,
    BridgeSettings,
    env_file_candidates,
    resolved_env_file,
)


def test_bridge_settings_defaults(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)

    settings = BridgeSettings()

    assert settings.codex_command == "codex"
    assert settings.quiet_flag == "-q"
    assert settings.max_output_bytes == MAX_OUTPUT_BYTES == 10 * 1024 * 1024
    assert settings.project_doc == "CLAUDE.md"
    assert settings.status_prompt == "summarize the current state of the project"
    assert settings.history_flag == "--history"


def test_bridge_settings_reads_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("CODEX_MCP_CODEX_COMMAND", "/opt/codex/bin/codex")
    monkeypatch.setenv("CODEX_MCP_MAX_OUTPUT_BYTES", "2048")
    monkeypatch.setenv("CODEX_MCP_LOG_LEVEL", "DEBUG")

    settings = BridgeSettings()

    assert settings.codex_command == "/opt/codex/bin/codex"
    assert settings.max_output_bytes == 2048
    assert settings.log_level == "DEBUG"


def test_bridge_settings_reads_dotenv_file(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text(
        "OPENAI_API_KEY=sk-ignored\nCODEX_MCP_PROJECT_DOC=docs/AGENTS.md\n",
        encoding="utf-8",
    )

    settings = BridgeSettings()

    assert settings.project_doc == "docs/AGENTS.md"


def test_only_working_directory_env_file_is_searched(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)

    assert env_file_candidates() == (".env",)
    assert resolved_env_file() is None

    (tmp_path / ".env").write_text("CODEX_MCP_LOG_LEVEL=DEBUG\n", encoding="utf-8")

    assert resolved_env_file() == ".env"
