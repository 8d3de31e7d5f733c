"""Catalog query capability backed by the ``GET /v1/products`` endpoints."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from rona_catalog.domain.errors import TransportError
from rona_catalog.domain.product import CatalogFilter, CatalogPage
from rona_catalog.domain.query_params import to_query_params

logger = logging.getLogger(__name__)


class HttpCatalogQuery:
    """
    Fetches catalog pages and single products over HTTP.

    - Sends the canonical query parameters of the filter
    - Maps timeouts, connection failures and non-2xx answers to TransportError
    - Passes items through untouched (plain JSON objects)
    """

    def __init__(self, client: httpx.AsyncClient, path: str = "/v1/products") -> None:
        self._client = client
        self._path = path

    async def query(self, catalog_filter: CatalogFilter) -> CatalogPage:
        response = await self._get(self._path, params=to_query_params(catalog_filter))
        return self._to_page(response)

    async def get(self, product_id: str) -> dict[str, Any] | None:
        """
        Fetch one product by id.

        Returns:
            The product as a plain JSON object, or None when the catalog
            answers 404.

        Raises:
            TransportError: On timeouts, connection failures, other non-2xx
                answers or a body that is not a JSON object
        """
        path = f"{self._path}/{product_id}"
        try:
            response = await self._get(path)
        except TransportError as exc:
            if exc.status_code == 404:
                return None
            raise

        try:
            payload = response.json()
        except ValueError as exc:
            raise TransportError("Malformed catalog response") from exc
        if not isinstance(payload, dict):
            raise TransportError("Malformed catalog response")
        return payload

    async def _get(self, path: str, params: Any = None) -> httpx.Response:
        try:
            response = await self._client.get(path, params=params)
            response.raise_for_status()
        except httpx.TimeoutException as exc:
            logger.warning("Catalog request timed out", extra={"path": path})
            raise TransportError("Catalog request timed out") from exc
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            logger.warning(
                "Catalog request rejected",
                extra={"path": path, "status_code": status_code},
            )
            raise TransportError(
                f"Catalog responded with HTTP {status_code}",
                status_code=status_code,
            ) from exc
        except httpx.HTTPError as exc:
            logger.warning(
                "Catalog request failed",
                extra={"path": path, "error_type": type(exc).__name__},
            )
            raise TransportError(str(exc) or "Catalog request failed") from exc
        return response

    def _to_page(self, response: httpx.Response) -> CatalogPage:
        try:
            payload: dict[str, Any] = response.json()
            pagination = payload["pagination"]
            return CatalogPage(
                items=list(payload["items"]),
                page=int(pagination["page"]),
                page_size=int(pagination["limit"]),
                total_items=int(pagination["total"]),
            )
        except (ValueError, KeyError, TypeError) as exc:
            raise TransportError("Malformed catalog response") from exc
