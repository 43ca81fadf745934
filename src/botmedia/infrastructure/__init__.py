# src/botmedia/infrastructure/__init__.py
"""Infrastructure layer - configuration, logging, disk and bot API adapters."""

from botmedia.infrastructure.bot_api import BotApiClient, bot_client_from_settings
from botmedia.infrastructure.filesystem import LocalFileSystem
from botmedia.infrastructure.logging_config import configure_logging, mask_token
from botmedia.infrastructure.settings import DEFAULT_API_URL, Settings, get_settings

__all__ = [
    # Settings
    "DEFAULT_API_URL",
    "Settings",
    "get_settings",
    # Logging
    "configure_logging",
    "mask_token",
    # Adapters
    "BotApiClient",
    "bot_client_from_settings",
    "LocalFileSystem",
]
