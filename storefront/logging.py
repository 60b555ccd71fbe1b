"""Logging setup shared by the storefront modules."""

import logging
import os
import sys
from functools import cache

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FORMAT_SIMPLE = "%(levelname)s - %(name)s - %(message)s"


def _get_log_level() -> int:
    level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
    return getattr(logging, level_name, logging.INFO)


def _configure_root_logger() -> None:
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(_get_log_level())

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(_get_log_level())
    # Vercel adds its own timestamps
    is_production = os.environ.get("VERCEL") == "1"
    handler.setFormatter(logging.Formatter(LOG_FORMAT_SIMPLE if is_production else LOG_FORMAT))
    root.addHandler(handler)

    # Upstash talks REST over httpx; its request logs are noise
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


_configure_root_logger()


@cache
def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def sanitize_id_for_logging(id_value: str | None, max_length: int = 40) -> str:
    """
    Make a shopper-supplied id (item id, storage key) safe for one log line.

    Item ids embed size labels read from the page, so control characters are
    escaped (CWE-117) and long values truncated.
    """
    if not id_value:
        return "N/A"
    safe_value = (
        str(id_value)
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
        .replace("\x00", "")
    )
    if len(safe_value) <= max_length:
        return safe_value
    return safe_value[:max_length] + "..."


__all__ = ["get_logger", "sanitize_id_for_logging"]
