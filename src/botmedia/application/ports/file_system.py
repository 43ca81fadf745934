from __future__ import annotations

from typing import Protocol


class FileSystem(Protocol):
    # Both methods raise OSError on failure.
    def read_bytes(self, path: str) -> bytes: ...
    def write_bytes(self, path: str, data: bytes) -> None: ...
