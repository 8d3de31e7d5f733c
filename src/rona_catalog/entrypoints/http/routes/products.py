from typing import Annotated

from fastapi import APIRouter, Depends, Query

from rona_catalog.entrypoints.http.dependencies import (
    get_get_product_by_id_use_case,
    get_search_catalog_use_case,
)
from rona_catalog.entrypoints.http.dtos.catalog_search import (
    ProductResponseDTO,
    ProductSearchQueryDTO,
    ProductSearchResponseDTO,
)
from rona_catalog.entrypoints.http.error_responses import ErrorResponse
from rona_catalog.entrypoints.http.mappers.catalog_search_mapper import CatalogSearchMapper
from rona_catalog.use_cases.get_product_by_id import GetProductById, GetProductByIdRequest
from rona_catalog.use_cases.search_product_catalog import SearchProductCatalog


router = APIRouter(tags=["Products"])


@router.get(
    "/products",
    response_model=ProductSearchResponseDTO,
    summary="Search product catalog",
    description="""
    Search active products with optional filters, sorting and pagination.

    ## Filters
    - All filters use AND semantics
    - `category` / `brand`: repeatable, a product matches any listed id
    - `search`: case-insensitive substring of name, description or SKU
    - Prices: inclusive range
    - `offers=true`: only products whose compare-at price is above the price

    ## Sorting
    - `relevance` (default): name matches first, then newest
    - `price`, `name`, `discount_percentage` with `sort_order`
    - Ties are broken by product id so pages never overlap

    ## Example
    ```
    GET /v1/products?category=cat-disjuntores&sort_by=price&sort_order=asc&limit=12
    ```
    """,
    responses={
        422: {"model": ErrorResponse, "description": "Validation error"},
    },
)
def search_products(
    query: Annotated[ProductSearchQueryDTO, Query()],
    use_case: SearchProductCatalog = Depends(get_search_catalog_use_case),
) -> ProductSearchResponseDTO:
    """Search products endpoint following parse → execute → map → return pattern."""
    request = CatalogSearchMapper.to_domain_request(query)

    page = use_case.execute(request)

    return CatalogSearchMapper.to_response(page)


@router.get(
    "/products/{product_id}",
    response_model=ProductResponseDTO,
    summary="Get product details",
    responses={
        404: {"model": ErrorResponse, "description": "Product not found or inactive"},
        422: {"model": ErrorResponse, "description": "Malformed product id"},
    },
)
def get_product(
    product_id: str,
    use_case: GetProductById = Depends(get_get_product_by_id_use_case),
) -> ProductResponseDTO:
    result = use_case.execute(GetProductByIdRequest(product_id=product_id))

    return CatalogSearchMapper.to_product_response(result.product)
