from __future__ import annotations

import logging
import os

from dotenv import load_dotenv


# Load .env early
load_dotenv()

# Key-value store backend for saved sessions: 'memory' or 'file'
STORAGE_TYPE = os.getenv("ENTROPY_STORAGE_TYPE", "file").strip().lower()
STORAGE_DIR = os.getenv("ENTROPY_STORAGE_DIR", "entropy_data").strip()
LOG_LEVEL = os.getenv("ENTROPY_LOG_LEVEL", "WARNING").strip().upper()


def configure_logging(level: str | None = None) -> int:
    """Apply the configured log level to the root logger and return it."""
    name = (level or LOG_LEVEL).upper()
    resolved = logging.getLevelName(name)
    if not isinstance(resolved, int):
        resolved = logging.WARNING
    logging.basicConfig(
        level=resolved,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger().setLevel(resolved)
    return resolved


__all__ = ["STORAGE_TYPE", "STORAGE_DIR", "LOG_LEVEL", "configure_logging"]
