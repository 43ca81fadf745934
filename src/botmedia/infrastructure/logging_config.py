"""Loguru setup and log-safe formatting helpers."""

from __future__ import annotations

import sys

from loguru import logger

from botmedia.infrastructure.settings import get_settings

MASK = "***"


def configure_logging(level: str | None = None) -> None:
    """Replace loguru's sinks with a single stderr sink.

    Called by entry points only; library code just logs.
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level=(level or get_settings().log_level).upper(),
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
    )


def mask_token(text: str, token: str) -> str:
    """Hide the bot token in URLs and error messages before logging them."""
    if not token:
        return text
    return text.replace(token, MASK)
