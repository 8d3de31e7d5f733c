from __future__ import annotations

from dataclasses import dataclass

from rona_catalog.domain.product import CatalogFilter, CatalogPage
from rona_catalog.ports.product_catalog_repository import ProductCatalogRepository


@dataclass(frozen=True, slots=True)
class SearchProductCatalogRequest:
    catalog_filter: CatalogFilter


class SearchProductCatalog:
    """
    Product catalog search with filters, sorting and pagination.

    This use case validates the filter and delegates filtering and sorting
    to the repository adapter. No filtering logic exists in the use case.
    """

    def __init__(self, product_catalog_repository: ProductCatalogRepository) -> None:
        self._repository = product_catalog_repository

    def execute(self, request: SearchProductCatalogRequest) -> CatalogPage:
        """
        Execute catalog search.

        Validates request parameters before delegating to repository.
        This is the single source of validation (contract programming).

        Args:
            request: Search parameters (filters, sort and paging)

        Returns:
            CatalogPage with the requested products and pagination counts

        Raises:
            FilterValidationError: If filter or paging parameters are invalid
        """
        catalog_filter = request.catalog_filter
        catalog_filter.validate()

        result = self._repository.search(catalog_filter)

        return CatalogPage(
            items=list(result.products),
            page=catalog_filter.page,
            page_size=catalog_filter.page_size,
            total_items=result.total_count,
        )
