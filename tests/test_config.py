"""Tests for AppSettings."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from pydantic import ValidationError

from core.config import AppSettings, get_user_config_dir


def test_defaults() -> None:
    settings = AppSettings()
    assert settings.log_level == "WARNING"
    assert settings.encoding == "utf-8"
    assert settings.read_failure_exit_code == 101


def test_env_prefix(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MKDIR_STDIN_LOG_LEVEL", "debug")
    monkeypatch.setenv("MKDIR_STDIN_READ_FAILURE_EXIT_CODE", "3")
    settings = AppSettings()
    assert settings.log_level == "DEBUG"
    assert settings.read_failure_exit_code == 3


def test_project_env_file(isolated_env: Path) -> None:
    (isolated_env / ".env").write_text("MKDIR_STDIN_ENCODING=latin-1\n", encoding="utf-8")
    assert AppSettings().encoding == "iso8859-1"


def test_encoding_is_normalized() -> None:
    assert AppSettings(encoding="UTF8").encoding == "utf-8"


def test_unknown_encoding_rejected() -> None:
    with pytest.raises(ValidationError):
        AppSettings(encoding="not-a-codec")


def test_unknown_log_level_rejected() -> None:
    with pytest.raises(ValidationError):
        AppSettings(log_level="verbose")


def test_exit_code_range() -> None:
    with pytest.raises(ValidationError):
        AppSettings(read_failure_exit_code=0)


@pytest.mark.skipif(not sys.platform.startswith("linux"), reason="XDG layout")
def test_user_config_dir_follows_xdg(tmp_path: Path) -> None:
    assert get_user_config_dir() == tmp_path / "xdg" / "mkdir-stdin"
