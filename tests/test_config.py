from __future__ import annotations

import sys

import pytest

from core.config import AppSettings, get_user_env_file, write_user_env_vars
from core.domain.errors import ConfigError


def test_credentials_from_environment(monkeypatch):
    monkeypatch.setenv("RESCUE_DOGS_CLIENT_ID", "env-id")
    monkeypatch.setenv("RESCUE_DOGS_CLIENT_SECRET", "env-secret")

    credentials = AppSettings(_env_file=None).credentials()

    assert credentials.client_id == "env-id"
    assert credentials.client_secret == "env-secret"
    assert "env-secret" not in repr(credentials)


@pytest.mark.parametrize(
    ("client_id", "client_secret"),
    [(None, None), ("id", None), (None, "secret"), ("  ", "secret")],
)
def test_missing_credentials_raise_config_error(client_id, client_secret):
    settings = AppSettings(client_id=client_id, client_secret=client_secret, _env_file=None)

    with pytest.raises(ConfigError):
        settings.credentials()


def test_defaults():
    settings = AppSettings(_env_file=None)

    assert settings.organization == "OR208"
    assert settings.http_timeout_seconds is None


def test_project_env_file_is_read(tmp_path):
    env_file = tmp_path / "custom.env"
    env_file.write_text("RESCUE_DOGS_CLIENT_ID=file-id\nRESCUE_DOGS_ORGANIZATION=WA01\n", encoding="utf-8")

    settings = AppSettings(_env_file=env_file)

    assert settings.client_id == "file-id"
    assert settings.organization == "WA01"


@pytest.mark.skipif(sys.platform.startswith("win") or sys.platform == "darwin", reason="XDG layout")
def test_write_user_env_vars_merges_existing(tmp_path):
    first = write_user_env_vars({"RESCUE_DOGS_CLIENT_ID": "old", "OTHER": "keep"})
    second = write_user_env_vars({"RESCUE_DOGS_CLIENT_ID": "new"})

    assert first == second == get_user_env_file()
    assert first.parent == tmp_path / "config" / "rescue-dogs"
    text = first.read_text(encoding="utf-8")
    assert "RESCUE_DOGS_CLIENT_ID=new" in text
    assert "OTHER=keep" in text
    assert "old" not in text
