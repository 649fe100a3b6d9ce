"""Tests for Dropbox configuration loading."""

import pytest

from mail_attachments.attachments import DOWNLOAD_ENDPOINT
from mail_attachments.config_loader import (
    ENV_ACCESS_TOKEN,
    ENV_ENDPOINT,
    DropboxConfig,
    load_dropbox_config,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv(ENV_ACCESS_TOKEN, raising=False)
    monkeypatch.delenv(ENV_ENDPOINT, raising=False)


def test_defaults():
    config = load_dropbox_config()
    assert config == DropboxConfig()
    assert config.access_token is None
    assert config.endpoint == DOWNLOAD_ENDPOINT
    assert config.enabled is False


def test_environment_variables(monkeypatch):
    monkeypatch.setenv(ENV_ACCESS_TOKEN, "env-token")
    monkeypatch.setenv(ENV_ENDPOINT, "http://localhost:9000/download")

    config = load_dropbox_config()
    assert config.access_token == "env-token"
    assert config.endpoint == "http://localhost:9000/download"
    assert config.enabled is True


def test_blank_environment_values_are_ignored(monkeypatch):
    monkeypatch.setenv(ENV_ACCESS_TOKEN, "   ")
    monkeypatch.setenv(ENV_ENDPOINT, "")

    config = load_dropbox_config()
    assert config.access_token is None
    assert config.endpoint == DOWNLOAD_ENDPOINT


def test_config_file_overrides_environment(tmp_path, monkeypatch):
    monkeypatch.setenv(ENV_ACCESS_TOKEN, "env-token")
    monkeypatch.setenv(ENV_ENDPOINT, "http://env/download")
    config_file = tmp_path / "config.ini"
    config_file.write_text("""
[dropbox]
access_token = file-token
""")

    config = load_dropbox_config(str(config_file))
    assert config.access_token == "file-token"
    # Not set in file, environment value is kept
    assert config.endpoint == "http://env/download"


def test_config_file_blank_value_keeps_fallback(tmp_path, monkeypatch):
    monkeypatch.setenv(ENV_ACCESS_TOKEN, "env-token")
    config_file = tmp_path / "config.ini"
    config_file.write_text("""
[dropbox]
access_token =
endpoint = https://proxy.example.com/dropbox/download
""")

    config = load_dropbox_config(str(config_file))
    assert config.access_token == "env-token"
    assert config.endpoint == "https://proxy.example.com/dropbox/download"


def test_config_file_without_dropbox_section(tmp_path):
    config_file = tmp_path / "config.ini"
    config_file.write_text("""
[cache]
memory_max_mb = 10
""")

    assert load_dropbox_config(str(config_file)) == DropboxConfig()


def test_missing_config_file_is_ignored(tmp_path, monkeypatch):
    monkeypatch.setenv(ENV_ACCESS_TOKEN, "env-token")

    config = load_dropbox_config(str(tmp_path / "nope.ini"))
    assert config.access_token == "env-token"
