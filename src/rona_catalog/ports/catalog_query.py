from __future__ import annotations

from typing import Protocol

from rona_catalog.domain.product import CatalogFilter, CatalogPage


class CatalogQuery(Protocol):
    """
    Paginated catalog query capability consumed by catalog views.

    Implementations:
        - return a CatalogPage whose items are already sorted and paged
        - report zero matches (including "no offers") as an empty page
        - raise TransportError when the backend cannot answer
        - stop promptly when their task is cancelled
    """

    async def query(self, catalog_filter: CatalogFilter) -> CatalogPage: ...
