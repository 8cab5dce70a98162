"""
GHL Utility Functions
=====================
Logging setup and small helpers shared across the package.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Iterable

from .config import settings

# ================================================================================
# LOGGING
# ================================================================================

def setup_logger(name: str = "ghl", level: str = "INFO") -> logging.Logger:
    """Set up and return a logger instance."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(asctime)s - %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    return logger


log = setup_logger(level=settings.LOG_LEVEL)


# ================================================================================
# STRING UTILITIES
# ================================================================================

def safe_json_parse(text: str, default: Any = None) -> Any:
    """Safely parse JSON with fallback."""
    if not text:
        return default
    try:
        return json.loads(text)
    except (json.JSONDecodeError, TypeError):
        return default


def truncate_text(text: str, max_length: int = 100, suffix: str = "...") -> str:
    """Truncate text to max length with suffix."""
    if not text or len(text) <= max_length:
        return text or ""
    return text[:max_length - len(suffix)] + suffix


def summarize_names(names: Iterable[str], max_length: int = 160) -> str:
    """Comma-join names for a single log line, truncated."""
    return truncate_text(", ".join(names), max_length)
