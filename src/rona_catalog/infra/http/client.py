from __future__ import annotations

import httpx

from rona_catalog.infra.http.config import catalog_api_timeout, catalog_api_url


def build_catalog_client(
    base_url: str | None = None,
    timeout: float | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """
    Async HTTP client pointed at the catalog API.

    Falls back to CATALOG_API_URL / CATALOG_API_TIMEOUT when arguments are
    omitted. The caller owns the client and must close it.
    """
    return httpx.AsyncClient(
        base_url=base_url or catalog_api_url(),
        timeout=timeout if timeout is not None else catalog_api_timeout(),
        transport=transport,
        headers={"Accept": "application/json"},
    )
