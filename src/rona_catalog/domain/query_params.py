"""Canonical query parameters for catalog filters.

The same parameter list is used as the de-duplication key of a catalog
view and as the query string sent to ``GET /v1/products``.
"""

from __future__ import annotations

from decimal import Decimal
from urllib.parse import urlencode

from rona_catalog.domain.product import CatalogFilter


def _decimal_param(value: Decimal | int | float) -> str:
    number = value if isinstance(value, Decimal) else Decimal(str(value))
    # 10, 10.0 and 1E+1 are the same bound
    return format(number.normalize(), "f")


def to_query_params(catalog_filter: CatalogFilter) -> list[tuple[str, str]]:
    """
    Encode a filter as an ordered list of query parameters.

    Paging and sort parameters are always present; optional filters only
    when set. Multi-valued fields are repeated once per value, in sorted
    order, so construction order never leaks into the result.
    """
    params: list[tuple[str, str]] = [
        ("page", str(catalog_filter.page)),
        ("limit", str(catalog_filter.page_size)),
    ]
    params.extend(("category", category_id) for category_id in sorted(catalog_filter.category_ids))
    params.extend(("brand", brand_id) for brand_id in sorted(catalog_filter.brand_ids))

    search = catalog_filter.normalized_search
    if search is not None:
        params.append(("search", search))
    if catalog_filter.min_price is not None:
        params.append(("min_price", _decimal_param(catalog_filter.min_price)))
    if catalog_filter.max_price is not None:
        params.append(("max_price", _decimal_param(catalog_filter.max_price)))

    params.append(("sort_by", catalog_filter.sort_field.value))
    params.append(("sort_order", catalog_filter.sort_direction.value))

    if catalog_filter.only_featured:
        params.append(("featured", "true"))
    if catalog_filter.only_offers:
        params.append(("offers", "true"))

    return params


def canonicalize(catalog_filter: CatalogFilter) -> str:
    """
    Deterministic string key for a filter.

    Pure and total: an inverted price range still produces a key, validation
    is left to the server.
    """
    return urlencode(to_query_params(catalog_filter))
