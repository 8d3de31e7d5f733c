from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Iterable

from rona_catalog.domain.errors import ValidationError


# ==============================================================================
# Domain Exceptions
# ==============================================================================


class FilterValidationError(ValidationError):
    """Raised when catalog filter or paging parameters are invalid."""

    pass


DEFAULT_PAGE_SIZE = 12
MAX_PAGE_SIZE = 100

_HUNDRED = Decimal("100")


class SortField(str, Enum):
    RELEVANCE = "relevance"
    PRICE = "price"
    NAME = "name"
    DISCOUNT_PERCENTAGE = "discount_percentage"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class Product:
    id: str
    name: str
    sku: str
    price: Decimal
    compare_price: Decimal | None = None
    stock_quantity: int = 0
    category_id: str | None = None
    brand_id: str | None = None
    description: str | None = None
    is_featured: bool = False
    is_active: bool = True
    created_at: datetime | None = None
    image_urls: tuple[str, ...] = ()
    rating: Decimal | None = None

    @property
    def is_on_offer(self) -> bool:
        """An offer is active while the compare-at price is above the selling price."""
        return self.compare_price is not None and self.compare_price > self.price

    @property
    def discount_percentage(self) -> Decimal:
        compare_price = self.compare_price
        if compare_price is None or compare_price <= self.price:
            return Decimal("0")
        return (compare_price - self.price) / compare_price * _HUNDRED


def _freeze_ids(ids: Iterable[str] | None) -> frozenset[str]:
    if ids is None:
        return frozenset()
    if isinstance(ids, str):
        return frozenset({ids})
    return frozenset(ids)


@dataclass(frozen=True, slots=True)
class CatalogFilter:
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    category_ids: frozenset[str] = field(default_factory=frozenset)
    brand_ids: frozenset[str] = field(default_factory=frozenset)
    search_text: str | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None
    sort_field: SortField = SortField.RELEVANCE
    sort_direction: SortDirection = SortDirection.ASC
    only_featured: bool = False
    only_offers: bool = False

    def __post_init__(self) -> None:
        # Callers may hand in lists or sets; the filter keeps immutable sets
        object.__setattr__(self, "category_ids", _freeze_ids(self.category_ids))
        object.__setattr__(self, "brand_ids", _freeze_ids(self.brand_ids))
        object.__setattr__(self, "sort_field", SortField(self.sort_field))
        object.__setattr__(self, "sort_direction", SortDirection(self.sort_direction))

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def normalized_search(self) -> str | None:
        """Search text with surrounding whitespace removed; blank means no search."""
        if self.search_text is None:
            return None
        text = self.search_text.strip()
        return text or None

    def validate(self) -> None:
        """
        Validate filter and paging parameters.

        Raises:
            FilterValidationError: If any parameter is invalid
        """
        if self.page < 1:
            raise FilterValidationError("page must be >= 1")
        if self.page_size < 1:
            raise FilterValidationError("page_size must be >= 1")
        if self.page_size > MAX_PAGE_SIZE:
            raise FilterValidationError(f"page_size must be <= {MAX_PAGE_SIZE}")

        # Guardrails: prevent float leakage past boundary
        for name in ("min_price", "max_price"):
            value = getattr(self, name)
            if value is None:
                continue
            if not isinstance(value, Decimal):
                raise FilterValidationError(
                    f"{name} must be Decimal or None (no floats past the boundary)"
                )
            if value < 0:
                raise FilterValidationError(f"{name} must be >= 0")

        if (
            self.min_price is not None
            and self.max_price is not None
            and self.min_price > self.max_price
        ):
            raise FilterValidationError("min_price cannot be greater than max_price")


def total_pages(total_items: int, page_size: int) -> int:
    if total_items <= 0 or page_size <= 0:
        return 0
    return math.ceil(total_items / page_size)


@dataclass(frozen=True)
class CatalogPage:
    """One page of catalog results plus the counts needed to paginate."""

    items: list[Any]
    page: int
    page_size: int
    total_items: int

    @property
    def total_pages(self) -> int:
        return total_pages(self.total_items, self.page_size)

    @classmethod
    def empty(cls, page: int = 1, page_size: int = DEFAULT_PAGE_SIZE) -> CatalogPage:
        return cls(items=[], page=page, page_size=page_size, total_items=0)
