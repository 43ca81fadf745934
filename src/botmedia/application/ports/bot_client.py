from __future__ import annotations

from typing import Optional, Protocol

from botmedia.domain.entities.file import File


class BotApiError(Exception):
    """Remote bot API call failed."""

    def __init__(self, description: str, error_code: Optional[int] = None) -> None:
        super().__init__(description)
        self.description = description
        self.error_code = error_code

    def __str__(self) -> str:
        if self.error_code is not None:
            return f"[{self.error_code}] {self.description}"
        return self.description


class BotClient(Protocol):
    # Base URL including the trailing "/bot", e.g. https://api.telegram.org/bot
    api_url: str
    token: str

    def get_file(self, file_id: str) -> File: ...
