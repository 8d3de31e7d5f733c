from __future__ import annotations

import os


def database_url() -> str:
    url = os.getenv("DATABASE_URL")

    if not url:
        raise RuntimeError("DATABASE_URL environment variable is not set")

    return url


def database_pool_size() -> int:
    return int(os.getenv("DATABASE_POOL_SIZE", "5"))


def database_max_overflow() -> int:
    return int(os.getenv("DATABASE_MAX_OVERFLOW", "10"))
