from __future__ import annotations

import os

DEFAULT_CATALOG_API_URL = "http://localhost:8000"
DEFAULT_CATALOG_API_TIMEOUT = 10.0


def catalog_api_url() -> str:
    return os.getenv("CATALOG_API_URL", DEFAULT_CATALOG_API_URL)


def catalog_api_timeout() -> float:
    """Seconds before a catalog request counts as failed."""
    raw = os.getenv("CATALOG_API_TIMEOUT")
    if not raw:
        return DEFAULT_CATALOG_API_TIMEOUT

    try:
        timeout = float(raw)
    except ValueError:
        raise RuntimeError(f"CATALOG_API_TIMEOUT must be a number of seconds, got {raw!r}")

    if timeout <= 0:
        raise RuntimeError("CATALOG_API_TIMEOUT must be > 0")
    return timeout
