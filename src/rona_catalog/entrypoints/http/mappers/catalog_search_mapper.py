from __future__ import annotations

from decimal import Decimal

from rona_catalog.domain.product import CatalogFilter, CatalogPage, Product
from rona_catalog.entrypoints.http.dtos.catalog_search import (
    PaginationDTO,
    ProductResponseDTO,
    ProductSearchQueryDTO,
    ProductSearchResponseDTO,
)
from rona_catalog.use_cases.search_product_catalog import SearchProductCatalogRequest

_CENTS = Decimal("0.01")


class CatalogSearchMapper:
    """Maps between REST DTOs and domain models for catalog search."""

    @staticmethod
    def to_domain_filter(dto: ProductSearchQueryDTO) -> CatalogFilter:
        """
        Converts query params to a domain filter, handling Decimal conversion.

        Args:
            dto: The data transfer object containing search query parameters

        Returns:
            CatalogFilter: Domain filter with Decimal prices
        """
        return CatalogFilter(
            page=dto.page,
            page_size=dto.limit,  # DTO uses 'limit', domain uses 'page_size'
            category_ids=frozenset(dto.category),
            brand_ids=frozenset(dto.brand),
            search_text=dto.search,
            min_price=Decimal(dto.min_price) if dto.min_price else None,
            max_price=Decimal(dto.max_price) if dto.max_price else None,
            sort_field=dto.sort_by,
            sort_direction=dto.sort_order,
            only_featured=dto.featured,
            only_offers=dto.offers,
        )

    @staticmethod
    def to_domain_request(dto: ProductSearchQueryDTO) -> SearchProductCatalogRequest:
        return SearchProductCatalogRequest(
            catalog_filter=CatalogSearchMapper.to_domain_filter(dto),
        )

    @staticmethod
    def to_product_response(product: Product) -> ProductResponseDTO:
        """
        Converts domain Product entity to REST response DTO.

        Handles Decimal → str conversion at the boundary.
        """
        return ProductResponseDTO(
            id=product.id,
            name=product.name,
            sku=product.sku,
            price=str(product.price),
            compare_price=str(product.compare_price) if product.compare_price is not None else None,
            is_on_offer=product.is_on_offer,
            discount_percentage=str(product.discount_percentage.quantize(_CENTS)),
            stock_quantity=product.stock_quantity,
            category_id=product.category_id,
            brand_id=product.brand_id,
            description=product.description,
            is_featured=product.is_featured,
            image_urls=list(product.image_urls),
            rating=str(product.rating) if product.rating is not None else None,
        )

    @staticmethod
    def to_response(page: CatalogPage) -> ProductSearchResponseDTO:
        """
        Converts a domain catalog page to the REST response with pagination metadata.

        Args:
            page: Domain page containing products and counts

        Returns:
            ProductSearchResponseDTO: REST response with items and pagination
        """
        return ProductSearchResponseDTO(
            items=[CatalogSearchMapper.to_product_response(product) for product in page.items],
            pagination=PaginationDTO(
                page=page.page,
                limit=page.page_size,
                total=page.total_items,
                pages=page.total_pages,
            ),
        )
