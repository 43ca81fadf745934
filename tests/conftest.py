from __future__ import annotations

from typing import Callable, Dict, List, Optional

import httpx
import pytest

from botmedia.application.ports.bot_client import BotApiError
from botmedia.domain.entities.file import File


class FakeBotClient:
    def __init__(
        self,
        files: Optional[Dict[str, File]] = None,
        *,
        api_url: str = "https://api.telegram.org/bot",
        token: str = "T",
    ):
        self.api_url = api_url
        self.token = token
        self.files = files or {}
        self.calls: List[str] = []

    def get_file(self, file_id: str) -> File:
        self.calls.append(file_id)
        if file_id not in self.files:
            raise BotApiError("Bad Request: invalid file_id", error_code=400)
        return self.files[file_id]

    def __enter__(self) -> "FakeBotClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        return None


class MemoryFileSystem:
    def __init__(self, files: Optional[Dict[str, bytes]] = None, *, fail_writes: bool = False):
        self.files: Dict[str, bytes] = dict(files or {})
        self.fail_writes = fail_writes

    def read_bytes(self, path: str) -> bytes:
        if path not in self.files:
            raise FileNotFoundError(2, "No such file or directory", path)
        return self.files[path]

    def write_bytes(self, path: str, data: bytes) -> None:
        if self.fail_writes:
            raise PermissionError(13, "Permission denied", path)
        self.files[path] = bytes(data)


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: List[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


@pytest.fixture
def memory_fs() -> MemoryFileSystem:
    return MemoryFileSystem()


@pytest.fixture
def make_http():
    clients: List[httpx.Client] = []

    def _make(handler: Callable[[httpx.Request], httpx.Response]):
        transport = RecordingTransport(handler)
        client = httpx.Client(transport=transport)
        clients.append(client)
        return client, transport

    yield _make

    for c in clients:
        c.close()


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    from botmedia.infrastructure.settings import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
