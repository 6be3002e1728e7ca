"""Centralized configuration for environment variables.

This module is the single source of truth for configuration used across the
application. Import constants and helpers from here rather than calling
os.getenv directly in multiple places.

Helpers read the environment at call time so settings can be changed without
re-importing the module.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Final

from dotenv import load_dotenv

from core.exceptions import ConfigurationError

# Load environment variables from .env if present
load_dotenv()

logger = logging.getLogger(__name__)

BASE_DIR: Final[Path] = Path(__file__).resolve().parent

# --- Templates ---
# Installed as package data of core
TEMPLATES_DIR: Final[str] = os.getenv(
    "TEMPLATES_DIR",
    str(BASE_DIR / "core" / "templates"),
)

# --- Logging ---
LOG_LEVEL: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()

# --- UI defaults ---
DEFAULT_TAG_SEARCH_URL: Final[str] = "/?search=tag:{tag}"
DEFAULT_TOAST_TIMEOUT_MS: Final[int] = 5000


def get_tag_emojis() -> dict[str, str]:
    """Parse TAG_EMOJIS ("tag=emoji,tag=emoji") into a lowercase-keyed map.

    Malformed entries are skipped with a warning.
    """
    raw = os.getenv("TAG_EMOJIS", "")
    emojis: dict[str, str] = {}
    for entry in raw.split(","):
        entry = entry.strip()
        if not entry:
            continue
        tag, sep, emoji = entry.partition("=")
        tag, emoji = tag.strip(), emoji.strip()
        if not sep or not tag or not emoji:
            logger.warning("Ignoring malformed TAG_EMOJIS entry: %r", entry)
            continue
        emojis[tag.lower()] = emoji
    return emojis


def get_tag_search_url() -> str:
    """Return the tag search URL template; it must contain '{tag}'."""
    template = os.getenv("TAG_SEARCH_URL", "").strip() or DEFAULT_TAG_SEARCH_URL
    if "{tag}" not in template:
        raise ConfigurationError(
            "TAG_SEARCH_URL must contain a {tag} placeholder",
            {"value": template},
        )
    return template


def get_toast_timeout_ms() -> int:
    """Default toast timeout in milliseconds (0 keeps toasts until dismissed)."""
    raw = os.getenv("TOAST_TIMEOUT_MS")
    if raw is None or not raw.strip():
        return DEFAULT_TOAST_TIMEOUT_MS
    try:
        value = int(raw)
    except ValueError:
        logger.warning(
            "Invalid TOAST_TIMEOUT_MS %r, using %d",
            raw,
            DEFAULT_TOAST_TIMEOUT_MS,
        )
        return DEFAULT_TOAST_TIMEOUT_MS
    if value < 0:
        logger.warning(
            "Negative TOAST_TIMEOUT_MS %d, using %d",
            value,
            DEFAULT_TOAST_TIMEOUT_MS,
        )
        return DEFAULT_TOAST_TIMEOUT_MS
    return value


__all__ = [
    "BASE_DIR",
    "DEFAULT_TAG_SEARCH_URL",
    "DEFAULT_TOAST_TIMEOUT_MS",
    "LOG_LEVEL",
    "TEMPLATES_DIR",
    "get_tag_emojis",
    "get_tag_search_url",
    "get_toast_timeout_ms",
]
