"""Tests for the mail-attachments command line."""

import json

import pytest
from aioresponses import aioresponses
from click.testing import CliRunner

from mail_attachments.attachments import DOWNLOAD_ENDPOINT
from mail_attachments.cli import main
from mail_attachments.config_loader import ENV_ACCESS_TOKEN, ENV_ENDPOINT


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv(ENV_ACCESS_TOKEN, raising=False)
    monkeypatch.delenv(ENV_ENDPOINT, raising=False)


@pytest.fixture
def runner():
    return CliRunner()


def test_fetch_requires_token(runner):
    result = runner.invoke(main, ["fetch", "/a.txt"])

    assert result.exit_code == 1
    assert "No Dropbox access token" in result.output


def test_fetch_prints_attachment_info(runner):
    with aioresponses() as m:
        m.post(
            DOWNLOAD_ENDPOINT,
            status=200,
            body=b"hello",
            headers={"Dropbox-API-Result": '{"name": "Hello.txt", "size": 5}'},
        )
        result = runner.invoke(main, ["fetch", "/greetings/hello.txt", "--token", "abc", "--json"])

    assert result.exit_code == 0, result.output
    info = json.loads(result.output)
    assert info == {
        "file_name": "Hello.txt",
        "content_type": "",
        "size": 5,
        "downloaded_bytes": 5,
    }


def test_fetch_writes_output_file(runner, tmp_path):
    target = tmp_path / "out.bin"
    with aioresponses() as m:
        m.post(DOWNLOAD_ENDPOINT, status=200, body=b"\x00\x01\x02")
        result = runner.invoke(main, ["fetch", "/bin/data.bin", "-t", "abc", "-o", str(target)])

    assert result.exit_code == 0, result.output
    assert target.read_bytes() == b"\x00\x01\x02"
    assert "Saved 3 bytes" in result.output


def test_fetch_save_uses_attachment_name(runner):
    with runner.isolated_filesystem():
        with aioresponses() as m:
            m.post(DOWNLOAD_ENDPOINT, status=200, body=b"csv,data")
            result = runner.invoke(main, ["fetch", "/exports/table.csv", "-t", "abc", "--save"])

        assert result.exit_code == 0, result.output
        with open("table.csv", "rb") as f:
            assert f.read() == b"csv,data"


def test_fetch_token_from_config_file(runner, tmp_path):
    config_file = tmp_path / "config.ini"
    config_file.write_text("""
[dropbox]
access_token = from-file
endpoint = http://localhost:9999/download
""")
    with aioresponses() as m:
        m.post("http://localhost:9999/download", status=200, body=b"ok")
        result = runner.invoke(main, ["fetch", "/a.txt", "--config", str(config_file), "--json"])

        request = next(iter(m.requests.values()))[0]

    assert result.exit_code == 0, result.output
    assert request.kwargs["headers"]["Authorization"] == "Bearer from-file"


def test_fetch_reports_classified_error(runner):
    with aioresponses() as m:
        m.post(DOWNLOAD_ENDPOINT, status=409, body='{"error_summary": "path/not_found/"}')
        result = runner.invoke(main, ["fetch", "/missing.txt", "-t", "abc"])

    assert result.exit_code == 1
    assert "NotFoundError" in result.output
    assert "path/not_found/" in result.output


def test_fetch_reports_unparseable_response(runner):
    with aioresponses() as m:
        m.post(DOWNLOAD_ENDPOINT, status=401, body="Unauthorized")
        result = runner.invoke(main, ["fetch", "/a.txt", "-t", "abc"])

    assert result.exit_code == 1
    assert "Unexpected Dropbox response" in result.output
