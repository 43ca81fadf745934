"""Interfaces to the collaborators the use cases depend on."""

from botmedia.application.ports.bot_client import BotApiError, BotClient
from botmedia.application.ports.file_system import FileSystem

__all__ = [
    "BotApiError",
    "BotClient",
    "FileSystem",
]
