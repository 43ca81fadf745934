"""Local disk implementation of the FileSystem port."""

from __future__ import annotations

from pathlib import Path

from loguru import logger


class LocalFileSystem:
    def read_bytes(self, path: str) -> bytes:
        return Path(path).read_bytes()

    def write_bytes(self, path: str, data: bytes) -> None:
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)
        logger.debug(f"Wrote {len(data)} bytes to {target}")
