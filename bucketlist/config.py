"""
Bucketlist client configuration: all environment variables in one place.

Read from environment at import time. Nothing here is required: every
setting has a default suitable for a local dev server.
"""

from __future__ import annotations

import os


def _env_bool(name: str, default: str = "false") -> bool:
    return os.environ.get(name, default).lower() in ("1", "true", "yes")


class Settings:
    """Client settings from environment variables."""

    # Remote store
    API_URL: str = os.environ.get("BUCKETLIST_API_URL", "http://localhost:8000")
    API_TOKEN: str = os.environ.get("BUCKETLIST_API_TOKEN", "")
    REQUEST_TIMEOUT: float = float(os.environ.get("BUCKETLIST_REQUEST_TIMEOUT", "30"))

    # Sync ordering: when enabled, a completed write that is no longer the
    # newest issued for its bucket does not trigger a refresh.
    DISCARD_STALE_WRITES: bool = _env_bool("BUCKETLIST_DISCARD_STALE_WRITES")

    # Edit policy
    MAX_TITLE_LENGTH: int = 20
    MAX_FILE_SIZE: int = 5 * 1024 * 1024  # 5 MiB, advisory only
    ALLOWED_IMAGE_EXTENSIONS: frozenset[str] = frozenset({"jpg", "jpeg", "png", "gif", "webp"})

    # Logging
    LOG_LEVEL: str = os.environ.get("BUCKETLIST_LOG_LEVEL", "WARNING").upper()


# Singleton instance
settings = Settings()
