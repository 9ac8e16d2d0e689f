import pytest

from codex_mcp.core import credentials
from codex_mcp.core.credentials import CredentialResolver
from codex_mcp.core.exceptions import CredentialMissing


@pytest.fixture
def dotenv_reads(monkeypatch):
    calls = []
    real_dotenv_values = credentials.dotenv_values

    def counting_dotenv_values(path, *args, **kwargs):
        calls.append(path)
        return real_dotenv_values(path, *args, **kwargs)

    monkeypatch.setattr(credentials, "dotenv_values", counting_dotenv_values)
    return calls


@pytest.fixture
def layout(tmp_path):
    project = tmp_path / "project"
    home = tmp_path / "home"
    project.mkdir()
    home.mkdir()
    return project, home


def test_environment_value_wins_without_file_io(layout, dotenv_reads):
    project, home = layout
    (project / ".env").write_text("OPENAI_API_KEY=cwd-key\n", encoding="utf-8")
    environ = {"OPENAI_API_KEY": "env-key", "HOME": str(home)}

    resolver = CredentialResolver(environ, cwd=project)

    assert resolver.ensure().get_secret_value() == "env-key"
    assert dotenv_reads == []


def test_working_directory_file_is_adopted_and_cached(layout, dotenv_reads):
    project, home = layout
    (project / ".env").write_text("OPENAI_API_KEY=  cwd-key  \n", encoding="utf-8")
    (home / ".env").write_text("OPENAI_API_KEY=home-key\n", encoding="utf-8")
    environ = {"HOME": str(home)}

    resolver = CredentialResolver(environ, cwd=project)
    first = resolver.ensure()
    second = resolver.ensure()

    assert first.get_secret_value() == "cwd-key"
    assert second.get_secret_value() == "cwd-key"
    assert environ["OPENAI_API_KEY"] == "cwd-key"
    assert len(dotenv_reads) == 1


def test_home_file_is_used_when_working_directory_lacks_key(layout, dotenv_reads):
    project, home = layout
    (project / ".env").write_text("OTHER_SETTING=1\n", encoding="utf-8")
    (home / ".env").write_text("OPENAI_API_KEY=home-key\n", encoding="utf-8")
    environ = {"HOME": str(home)}

    resolver = CredentialResolver(environ, cwd=project)

    assert resolver.ensure().get_secret_value() == "home-key"
    assert environ["OPENAI_API_KEY"] == "home-key"
    assert len(dotenv_reads) == 2


def test_undecodable_working_directory_file_falls_through_to_home(layout):
    project, home = layout
    (project / ".env").write_bytes(b"OPENAI_API_KEY=\xff\xfe\n")
    (home / ".env").write_text("OPENAI_API_KEY=home-key\n", encoding="utf-8")
    environ = {"HOME": str(home)}

    resolver = CredentialResolver(environ, cwd=project)

    assert resolver.ensure().get_secret_value() == "home-key"
    assert environ["OPENAI_API_KEY"] == "home-key"


def test_permission_denied_file_is_treated_as_absent(layout, monkeypatch):
    project, home = layout
    (project / ".env").write_text("OPENAI_API_KEY=cwd-key\n", encoding="utf-8")
    (home / ".env").write_text("OPENAI_API_KEY=home-key\n", encoding="utf-8")
    real_dotenv_values = credentials.dotenv_values

    def guarded_dotenv_values(path, *args, **kwargs):
        if path == project / ".env":
            raise PermissionError(13, "Permission denied", str(path))
        return real_dotenv_values(path, *args, **kwargs)

    monkeypatch.setattr(credentials, "dotenv_values", guarded_dotenv_values)

    resolver = CredentialResolver({"HOME": str(home)}, cwd=project)

    assert resolver.ensure().get_secret_value() == "home-key"


def test_home_fallback_used_when_home_unset(tmp_path):
    project = tmp_path / "project"
    fallback = tmp_path / "fallback-home"
    project.mkdir()
    fallback.mkdir()
    (fallback / ".env").write_text("OPENAI_API_KEY=fallback-key\n", encoding="utf-8")

    resolver = CredentialResolver({}, cwd=project, home_fallback=str(fallback))

    assert resolver.ensure().get_secret_value() == "fallback-key"


def test_missing_everywhere_names_both_locations(layout):
    project, home = layout
    (home / ".env").write_text("OPENAI_API_KEY=\n", encoding="utf-8")

    resolver = CredentialResolver({"HOME": str(home)}, cwd=project)

    with pytest.raises(CredentialMissing) as excinfo:
        resolver.ensure()

    message = str(excinfo.value)
    assert "OPENAI_API_KEY" in message
    assert str(project / ".env") in message
    assert str(home / ".env") in message


def test_secret_is_not_exposed_in_repr(layout):
    project, home = layout
    resolver = CredentialResolver({"OPENAI_API_KEY": "sk-secret", "HOME": str(home)}, cwd=project)

    assert "sk-secret" not in repr(resolver.ensure())
