"""
Tests for AppSettings and the user .env helpers.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from core.config import AppSettings, save_user_settings, write_user_env_vars


@pytest.fixture(autouse=True)
def clean_env(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for key in ("LIBRARY_FILES", "PROMPT", "SHOW_BANNER", "LOG_LEVEL", "FILE_ENCODING"):
        monkeypatch.delenv(f"BOOKSHELF_{key}", raising=False)


def test_defaults():
    settings = AppSettings(_env_file=None)
    assert settings.library_files == []
    assert settings.prompt == "> "
    assert settings.show_banner is True
    assert settings.log_level == "INFO"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("BOOKSHELF_LIBRARY_FILES", '["a.csv", "b.csv"]')
    monkeypatch.setenv("BOOKSHELF_LOG_LEVEL", "warning")

    settings = AppSettings(_env_file=None)

    assert settings.library_files == [Path("a.csv"), Path("b.csv")]
    assert settings.log_level == "WARNING"


def test_unknown_log_level_rejected(monkeypatch):
    monkeypatch.setenv("BOOKSHELF_LOG_LEVEL", "chatty")
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None)


def test_project_env_file_is_read(tmp_path):
    (tmp_path / ".env").write_text("BOOKSHELF_PROMPT=shelf>\n", encoding="utf-8")
    assert AppSettings().prompt == "shelf>"


def test_write_user_env_vars_merges(tmp_path):
    env_path = tmp_path / "cfg" / ".env"
    write_user_env_vars({"BOOKSHELF_PROMPT": "$"}, env_path=env_path)
    write_user_env_vars({"BOOKSHELF_LOG_LEVEL": "DEBUG"}, env_path=env_path)

    lines = env_path.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("#")
    assert "BOOKSHELF_PROMPT=$" in lines
    assert "BOOKSHELF_LOG_LEVEL=DEBUG" in lines


def test_prompt_with_trailing_space_survives_a_reload(tmp_path):
    env_path = tmp_path / ".env"
    save_user_settings(prompt="> ", env_path=env_path)

    assert 'BOOKSHELF_PROMPT="> "' in env_path.read_text(encoding="utf-8").splitlines()
    assert AppSettings(_env_file=env_path).prompt == "> "


def test_saved_library_files_are_read_back(tmp_path):
    env_path = tmp_path / ".env"
    save_user_settings(library_files=[Path("a.csv"), Path("b.csv")], show_banner=False, env_path=env_path)

    settings = AppSettings(_env_file=env_path)
    assert settings.library_files == [Path("a.csv"), Path("b.csv")]
    assert settings.show_banner is False


def test_save_normalises_log_level(tmp_path):
    env_path = tmp_path / ".env"
    save_user_settings(log_level="debug", env_path=env_path)

    assert "BOOKSHELF_LOG_LEVEL=DEBUG" in env_path.read_text(encoding="utf-8").splitlines()


def test_save_rejects_invalid_values(tmp_path):
    env_path = tmp_path / ".env"
    with pytest.raises(ValidationError):
        save_user_settings(log_level="chatty", env_path=env_path)
    assert not env_path.exists()


def test_save_rejects_unknown_settings(tmp_path):
    with pytest.raises(ValueError, match="unknown settings: colour"):
        save_user_settings(colour="blue", env_path=tmp_path / ".env")


def test_write_rejects_keys_outside_prefix(tmp_path):
    env_path = tmp_path / ".env"
    with pytest.raises(ValueError, match="OTHER_APP_KEY"):
        write_user_env_vars({"OTHER_APP_KEY": "x"}, env_path=env_path)
    assert not env_path.exists()
