"""Tests for application settings and the user .env file."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from pydantic import ValidationError

from core.config import AppSettings, get_user_config_dir, write_user_env_vars


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("WOO_REMOTE_AUTH_TOKEN", raising=False)
    monkeypatch.delenv("WOO_REMOTE_DOTCOM_BASE_URL", raising=False)

    settings = AppSettings(_env_file=None)

    assert settings.rest_root == "https://public-api.wordpress.com"
    assert settings.auth_token is None
    assert settings.default_page_size == 25


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WOO_REMOTE_AUTH_TOKEN", "from-env")
    monkeypatch.setenv("WOO_REMOTE_HTTP_TIMEOUT_SECONDS", "3.5")

    settings = AppSettings(_env_file=None)

    assert settings.auth_token == "from-env"
    assert settings.http_timeout_seconds == 3.5


def test_env_file(tmp_path: Path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("WOO_REMOTE_DOTCOM_BASE_URL=https://api.example.test/\n", encoding="utf-8")

    settings = AppSettings(_env_file=env_file)

    assert settings.rest_root == "https://api.example.test"


@pytest.mark.parametrize("page_size", [0, 101])
def test_page_size_bounds(page_size: int) -> None:
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None, default_page_size=page_size)


@pytest.mark.skipif(sys.platform.startswith("win") or sys.platform == "darwin", reason="XDG layout")
def test_user_config_dir_follows_xdg(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert get_user_config_dir() == tmp_path / "woo-remote"


def test_write_user_env_vars_merges(tmp_path: Path) -> None:
    env_path = tmp_path / "cfg" / ".env"
    env_path.parent.mkdir()
    env_path.write_text("# old\nWOO_REMOTE_AUTH_TOKEN='old'\nOTHER=1\n", encoding="utf-8")

    write_user_env_vars({"WOO_REMOTE_AUTH_TOKEN": "new", "WOO_REMOTE_LOG_JSON": None}, env_path=env_path)

    assert env_path.read_text(encoding="utf-8") == (
        "# woo-remote user config (.env)\nOTHER=1\nWOO_REMOTE_AUTH_TOKEN=new\n"
    )
