from __future__ import annotations

from rona_catalog.domain.product import CatalogFilter, Product, SortDirection, SortField
from rona_catalog.ports.product_catalog_repository import ProductCatalogRepository, SearchResult


class InMemoryProductCatalogRepository(ProductCatalogRepository):
    """
    Canonical contract implementation for tests.

    - Stores products in insertion order
    - Hides inactive products
    - Applies AND-semantics filtering
    - Sorts with id ascending as the final tie-break
    - Applies paging AFTER filtering and sorting
    - Returns total_count of matching products before paging
    """

    def __init__(self, products: list[Product]) -> None:
        self._products = products

    def search(self, catalog_filter: CatalogFilter) -> SearchResult:
        # Trust that UseCase has validated inputs (contract programming)
        matches = [p for p in self._products if self._matches(p, catalog_filter)]
        total_count = len(matches)  # Count BEFORE paging

        ordered = self._sort(matches, catalog_filter)

        start = catalog_filter.offset
        end = start + catalog_filter.page_size

        return SearchResult(products=ordered[start:end], total_count=total_count)

    def get_by_id(self, product_id: str) -> Product | None:
        for product in self._products:
            if product.id == product_id and product.is_active:
                return product
        return None

    def _matches(self, product: Product, catalog_filter: CatalogFilter) -> bool:
        if not product.is_active:
            return False
        if catalog_filter.category_ids and product.category_id not in catalog_filter.category_ids:
            return False
        if catalog_filter.brand_ids and product.brand_id not in catalog_filter.brand_ids:
            return False
        search = catalog_filter.normalized_search
        if search is not None and not self._matches_search(product, search):
            return False
        if catalog_filter.min_price is not None and product.price < catalog_filter.min_price:
            return False
        if catalog_filter.max_price is not None and product.price > catalog_filter.max_price:
            return False
        if catalog_filter.only_featured and not product.is_featured:
            return False
        if catalog_filter.only_offers and not product.is_on_offer:
            return False
        return True

    @staticmethod
    def _matches_search(product: Product, search: str) -> bool:
        needle = search.lower()
        haystacks = (product.name, product.description or "", product.sku)
        return any(needle in text.lower() for text in haystacks)

    def _sort(self, products: list[Product], catalog_filter: CatalogFilter) -> list[Product]:
        # Stable sorts, least significant key first
        ordered = sorted(products, key=lambda p: p.id)
        descending = catalog_filter.sort_direction is SortDirection.DESC

        if catalog_filter.sort_field is SortField.PRICE:
            ordered.sort(key=lambda p: p.price, reverse=descending)
        elif catalog_filter.sort_field is SortField.NAME:
            # lower(), not casefold(), to order like the SQL adapter
            ordered.sort(key=lambda p: p.name.lower(), reverse=descending)
        elif catalog_filter.sort_field is SortField.DISCOUNT_PERCENTAGE:
            ordered.sort(key=lambda p: p.discount_percentage, reverse=descending)
        else:
            # Relevance: name hits first, then newest; direction does not apply
            ordered.sort(
                key=lambda p: p.created_at.timestamp() if p.created_at else float("-inf"),
                reverse=True,
            )
            search = catalog_filter.normalized_search
            if search is not None:
                needle = search.lower()
                ordered.sort(key=lambda p: needle not in p.name.lower())

        return ordered
