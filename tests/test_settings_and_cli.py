from __future__ import annotations

import httpx
import pytest

from botmedia.cli import fetch_file
from botmedia.domain.entities.file import File
from botmedia.infrastructure.logging_config import mask_token
from botmedia.infrastructure.settings import DEFAULT_API_URL, get_settings

from conftest import FakeBotClient


def test_settings_defaults(monkeypatch):
    for name in ("BOTMEDIA_BOT_TOKEN", "BOTMEDIA_API_URL", "BOTMEDIA_HTTP_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    settings = get_settings()
    assert settings.api_url == DEFAULT_API_URL
    assert settings.http_timeout == 30.0
    timeout = settings.http_client_timeout()
    assert timeout.connect == 10.0
    assert timeout.read == 30.0


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("BOTMEDIA_BOT_TOKEN", "123:ABC")
    monkeypatch.setenv("BOTMEDIA_API_URL", "http://localhost:8081/bot")
    monkeypatch.setenv("BOTMEDIA_HTTP_TIMEOUT", "5")
    settings = get_settings()
    assert settings.bot_token.get_secret_value() == "123:ABC"
    assert "123:ABC" not in repr(settings)
    assert settings.api_url == "http://localhost:8081/bot"
    assert settings.http_timeout == 5.0


def test_mask_token():
    url = "https://api.telegram.org/file/bot123:ABC/docs/a.pdf"
    assert mask_token(url, "123:ABC") == "https://api.telegram.org/file/bot***/docs/a.pdf"
    assert mask_token(url, "") == url


@pytest.fixture
def cli_client(monkeypatch, make_http):
    client = FakeBotClient(
        {
            "doc": File(file_id="doc", file_path="docs/a.pdf"),
            "expired": File(file_id="expired"),
        },
        token="123:ABC",
    )
    http, transport = make_http(lambda r: httpx.Response(200, content=b"%PDF"))

    monkeypatch.setattr(fetch_file, "bot_client_from_settings", lambda settings=None: client)
    monkeypatch.setattr(fetch_file, "configure_logging", lambda level=None: None)

    original = fetch_file.FileDownloader

    def _downloader(c, **kwargs):
        return original(c, http=http, **kwargs)

    monkeypatch.setattr(fetch_file, "FileDownloader", _downloader)
    return client, transport


def test_cli_downloads(cli_client, tmp_path, capsys):
    target = tmp_path / "a.pdf"
    assert fetch_file.main(["doc", str(target)]) == 0
    assert target.read_bytes() == b"%PDF"
    assert "Saved doc" in capsys.readouterr().out


def test_cli_url_only_masks_token(cli_client, capsys):
    assert fetch_file.main(["doc", "--url-only"]) == 0
    out = capsys.readouterr().out.strip()
    assert out == "https://api.telegram.org/file/bot***/docs/a.pdf"


def test_cli_reports_failure(cli_client, tmp_path, capsys):
    assert fetch_file.main(["expired", str(tmp_path / "x")]) == 1
    assert "File path not available" in capsys.readouterr().out


def test_cli_requires_token(monkeypatch, capsys):
    monkeypatch.delenv("BOTMEDIA_BOT_TOKEN", raising=False)
    monkeypatch.setattr(fetch_file, "configure_logging", lambda level=None: None)
    def _no_token(settings=None):
        raise ValueError("BOTMEDIA_BOT_TOKEN is required")

    monkeypatch.setattr(fetch_file, "bot_client_from_settings", _no_token)
    assert fetch_file.main(["doc", "out.pdf"]) == 1
