from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from rona_catalog.domain.product import CatalogFilter, Product


@dataclass(frozen=True)
class SearchResult:
    """Result from catalog search including pagination metadata."""

    products: list[Product]
    total_count: int  # Total matching products before paging


class ProductCatalogRepository(ABC):
    """
    Port for product catalog data access.

    Contract:
        - Only active products are visible
        - Filters combine with AND semantics
        - Results are sorted by the filter's sort field and direction, with
          ties broken by product id ascending so pages never overlap
        - total_count is computed before paging
        - filter must be pre-validated by caller (UseCase); implementations
          do not re-validate
    """

    @abstractmethod
    def search(self, catalog_filter: CatalogFilter) -> SearchResult:
        """
        Search catalog with filters, sorting and paging.

        Args:
            catalog_filter: Filter, sort and paging criteria - pre-validated

        Returns:
            SearchResult containing the requested page and the total count
        """
        ...

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return the active product with this id, or None."""
        ...
