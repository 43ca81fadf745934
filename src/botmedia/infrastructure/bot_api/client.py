"""httpx-backed client for the bot API metadata calls."""

from __future__ import annotations

from typing import Any

import httpx
from loguru import logger
from pydantic import ValidationError

from botmedia.application.ports.bot_client import BotApiError
from botmedia.domain.entities.file import File
from botmedia.infrastructure.logging_config import mask_token
from botmedia.infrastructure.settings import DEFAULT_API_URL, Settings, get_settings


class BotApiClient:
    """Bot API client exposing the two accessors and getFile."""

    def __init__(
        self,
        token: str,
        api_url: str = DEFAULT_API_URL,
        http: httpx.Client | None = None,
        timeout: httpx.Timeout | float = 30.0,
    ):
        if not token:
            raise ValueError("Bot token is required")

        self.token = token
        self.api_url = api_url
        self._owns_http = http is None
        self.http = http or httpx.Client(timeout=timeout)

    def method_url(self, method: str) -> str:
        return f"{self.api_url}{self.token}/{method}"

    def call(self, method: str, payload: dict[str, Any]) -> Any:
        """Call an API method and return the ``result`` of the response envelope."""
        url = self.method_url(method)
        try:
            response = self.http.post(url, json=payload)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"Bot API {method} transport error: {mask_token(str(e), self.token)}")
            raise BotApiError(f"{method} request failed: {mask_token(str(e), self.token)}") from e

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"Bot API {method} returned non-JSON body (HTTP {response.status_code})")
            raise BotApiError(
                f"{method} returned invalid JSON", error_code=response.status_code
            ) from e

        if not isinstance(data, dict) or not data.get("ok"):
            description = "unknown error"
            error_code = response.status_code
            if isinstance(data, dict):
                description = data.get("description") or description
                error_code = data.get("error_code", error_code)
            logger.warning(f"Bot API {method} error {error_code}: {description}")
            raise BotApiError(description, error_code=error_code)

        return data.get("result")

    def get_file(self, file_id: str) -> File:
        result = self.call("getFile", {"file_id": file_id})
        try:
            file = File.model_validate(result)
        except ValidationError as e:
            raise BotApiError(f"getFile returned unexpected result: {e.error_count()} validation error(s)") from e
        logger.debug(f"Resolved file {file_id} -> {file.file_path}")
        return file

    def close(self) -> None:
        if self._owns_http:
            self.http.close()

    def __enter__(self) -> BotApiClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def bot_client_from_settings(settings: Settings | None = None) -> BotApiClient:
    settings = settings or get_settings()
    if settings.bot_token is None:
        raise ValueError("BOTMEDIA_BOT_TOKEN is required")
    return BotApiClient(
        token=settings.bot_token.get_secret_value(),
        api_url=settings.api_url,
        timeout=settings.http_client_timeout(),
    )
