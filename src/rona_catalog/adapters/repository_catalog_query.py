from __future__ import annotations

import asyncio

from rona_catalog.domain.errors import DomainError, TransportError
from rona_catalog.domain.product import CatalogFilter, CatalogPage
from rona_catalog.use_cases.search_product_catalog import (
    SearchProductCatalog,
    SearchProductCatalogRequest,
)


class RepositoryCatalogQuery:
    """
    In-process catalog query capability.

    Runs the SearchProductCatalog use case in a worker thread so catalog
    views can sit next to the repository without going through HTTP.
    Domain errors (e.g. an inverted price range) surface as TransportError,
    the same way the HTTP adapter reports a 422.
    """

    def __init__(self, use_case: SearchProductCatalog) -> None:
        self._use_case = use_case

    async def query(self, catalog_filter: CatalogFilter) -> CatalogPage:
        request = SearchProductCatalogRequest(catalog_filter=catalog_filter)
        try:
            return await asyncio.to_thread(self._use_case.execute, request)
        except DomainError as exc:
            raise TransportError(exc.message, error_code=exc.error_code) from exc
