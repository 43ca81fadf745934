"""Bot API adapter."""

from botmedia.infrastructure.bot_api.client import BotApiClient, bot_client_from_settings

__all__ = [
    "BotApiClient",
    "bot_client_from_settings",
]
