"""
Test suite for InMemoryProductCatalogRepository.

This suite is the reference for the ProductCatalogRepository contract.

Test sections:
- Filter Edge Cases: category/brand/search/price/featured/offers semantics
- Sorting: every sort field, both directions, deterministic tie-break
- Paging Edge Cases: paging after filtering and sorting, totals before paging
- Catalog Scenarios: end-to-end listings the storefront relies on
- Case Folding: search and name order fold case with lower(), as SQL does
"""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from rona_catalog.adapters.in_memory_product_catalog_repository import (
    InMemoryProductCatalogRepository,
)
from rona_catalog.domain.product import CatalogFilter, Product, SortDirection, SortField


def _at(day: int) -> datetime:
    return datetime(2026, 3, day, tzinfo=timezone.utc)


@pytest.fixture()
def products() -> list[Product]:
    return [
        Product(
            id="p1",
            name="Disjuntor Bipolar 25A",
            sku="DJ-25",
            price=Decimal("45.50"),
            category_id="cat-disjuntores",
            brand_id="brand-schneider",
            created_at=_at(1),
        ),
        Product(
            id="p2",
            name="Fio Flexível 2,5mm² 100m",
            sku="FIO-25",
            price=Decimal("89.90"),
            compare_price=Decimal("99.90"),
            category_id="cat-fios",
            brand_id="brand-prysmian",
            description="Ideal para circuitos de tomada e disjuntor geral",
            created_at=_at(5),
        ),
        Product(
            id="p3",
            name="Furadeira de Impacto 650W",
            sku="FUR-650",
            price=Decimal("189.90"),
            compare_price=Decimal("229.90"),
            category_id="cat-ferramentas",
            brand_id="brand-bosch",
            is_featured=True,
            created_at=_at(3),
        ),
        Product(
            id="p4",
            name="lâmpada LED 12W",
            sku="LED-12",
            price=Decimal("8.90"),
            category_id="cat-iluminacao",
            brand_id="brand-philips",
            is_featured=True,
            created_at=_at(4),
        ),
        Product(
            id="p5",
            name="Disjuntor Monopolar 16A",
            sku="DJ-16",
            price=Decimal("45.50"),
            compare_price=Decimal("45.50"),  # same price: not an offer
            category_id="cat-disjuntores",
            brand_id="brand-weg",
            created_at=_at(2),
        ),
        Product(
            id="p6",
            name="Bomba Centrífuga 1/2CV",
            sku="BMB-12",
            price=Decimal("299.90"),
            category_id="cat-bombas",
            brand_id="brand-weg",
            is_active=False,
            created_at=_at(6),
        ),
    ]


def _ids(repo: InMemoryProductCatalogRepository, catalog_filter: CatalogFilter) -> list[str]:
    return [p.id for p in repo.search(catalog_filter).products]


# ==============================================================================
# Filter Edge Cases
# ==============================================================================


def test_inactive_products_are_never_listed(products: list[Product]) -> None:
    repo = InMemoryProductCatalogRepository(products)

    result = repo.search(CatalogFilter(page_size=50))

    assert "p6" not in [p.id for p in result.products]
    assert result.total_count == 5


def test_category_filter_matches_any_listed_category(products: list[Product]) -> None:
    repo = InMemoryProductCatalogRepository(products)

    ids = _ids(
        repo,
        CatalogFilter(
            category_ids={"cat-disjuntores", "cat-fios"},
            sort_field=SortField.NAME,
            page_size=50,
        ),
    )

    assert ids == ["p1", "p5", "p2"]


def test_brand_filter(products: list[Product]) -> None:
    repo = InMemoryProductCatalogRepository(products)

    assert _ids(repo, CatalogFilter(brand_ids={"brand-weg"}, page_size=50)) == ["p5"]


def test_search_matches_name_description_and_sku_case_insensitively(
    products: list[Product],
) -> None:
    repo = InMemoryProductCatalogRepository(products)

    by_name_or_description = _ids(
        repo, CatalogFilter(search_text="DISJUNTOR", sort_field=SortField.NAME, page_size=50)
    )
    by_sku = _ids(repo, CatalogFilter(search_text="led-12", page_size=50))

    # p2 only mentions "disjuntor" in its description
    assert by_name_or_description == ["p1", "p5", "p2"]
    assert by_sku == ["p4"]


def test_price_range_inclusive(products: list[Product]) -> None:
    repo = InMemoryProductCatalogRepository(products)

    ids = _ids(
        repo,
        CatalogFilter(
            min_price=Decimal("45.50"),
            max_price=Decimal("89.90"),
            sort_field=SortField.PRICE,
            page_size=50,
        ),
    )

    assert ids == ["p1", "p5", "p2"]


def test_featured_filter(products: list[Product]) -> None:
    repo = InMemoryProductCatalogRepository(products)

    ids = _ids(repo, CatalogFilter(only_featured=True, sort_field=SortField.PRICE, page_size=50))

    assert ids == ["p4", "p3"]


def test_offers_filter_requires_compare_price_above_price(products: list[Product]) -> None:
    repo = InMemoryProductCatalogRepository(products)

    ids = _ids(repo, CatalogFilter(only_offers=True, sort_field=SortField.PRICE, page_size=50))

    assert ids == ["p2", "p3"]


def test_filters_combine_with_and_semantics(products: list[Product]) -> None:
    repo = InMemoryProductCatalogRepository(products)

    ids = _ids(
        repo,
        CatalogFilter(only_featured=True, only_offers=True, category_ids={"cat-ferramentas"}),
    )

    assert ids == ["p3"]


# ==============================================================================
# Sorting
# ==============================================================================


def test_sort_by_price_breaks_ties_by_id_in_both_directions(products: list[Product]) -> None:
    repo = InMemoryProductCatalogRepository(products)

    ascending = _ids(repo, CatalogFilter(sort_field=SortField.PRICE, page_size=50))
    descending = _ids(
        repo,
        CatalogFilter(
            sort_field=SortField.PRICE,
            sort_direction=SortDirection.DESC,
            page_size=50,
        ),
    )

    assert ascending == ["p4", "p1", "p5", "p2", "p3"]
    # p1 and p5 share a price: still id ascending
    assert descending == ["p3", "p2", "p1", "p5", "p4"]


def test_sort_by_name_ignores_case(products: list[Product]) -> None:
    repo = InMemoryProductCatalogRepository(products)

    ids = _ids(repo, CatalogFilter(sort_field=SortField.NAME, page_size=50))

    assert ids == ["p1", "p5", "p2", "p3", "p4"]


def test_sort_by_discount_percentage(products: list[Product]) -> None:
    repo = InMemoryProductCatalogRepository(products)

    ids = _ids(
        repo,
        CatalogFilter(
            sort_field=SortField.DISCOUNT_PERCENTAGE,
            sort_direction=SortDirection.DESC,
            page_size=50,
        ),
    )

    # p3 ~17.4%, p2 ~10%, the rest 0% in id order
    assert ids == ["p3", "p2", "p1", "p4", "p5"]


def test_relevance_without_search_lists_newest_first(products: list[Product]) -> None:
    repo = InMemoryProductCatalogRepository(products)

    assert _ids(repo, CatalogFilter(page_size=50)) == ["p2", "p4", "p3", "p5", "p1"]


def test_relevance_with_search_lists_name_matches_first(products: list[Product]) -> None:
    repo = InMemoryProductCatalogRepository(products)

    ids = _ids(repo, CatalogFilter(search_text="disjuntor", page_size=50))

    # Name hits newest first, then the description-only hit
    assert ids == ["p5", "p1", "p2"]


def test_products_without_creation_date_sort_last_by_relevance() -> None:
    repo = InMemoryProductCatalogRepository(
        [
            Product(id="a", name="A", sku="A", price=Decimal("1")),
            Product(id="b", name="B", sku="B", price=Decimal("1"), created_at=_at(1)),
        ]
    )

    assert _ids(repo, CatalogFilter()) == ["b", "a"]


# ==============================================================================
# Paging Edge Cases
# ==============================================================================


def test_paging_applies_after_filtering_and_sorting(products: list[Product]) -> None:
    repo = InMemoryProductCatalogRepository(products)

    result = repo.search(CatalogFilter(sort_field=SortField.PRICE, page=2, page_size=2))

    assert [p.id for p in result.products] == ["p5", "p2"]
    assert result.total_count == 5


def test_pages_never_overlap_with_tied_sort_keys() -> None:
    tied = [
        Product(id=f"p{i:02d}", name="Joelho 90° 25mm", sku=f"J-{i}", price=Decimal("2.90"))
        for i in (7, 3, 11, 1, 5, 9)
    ]
    repo = InMemoryProductCatalogRepository(tied)

    seen: list[str] = []
    for page in (1, 2, 3):
        seen += _ids(repo, CatalogFilter(sort_field=SortField.PRICE, page=page, page_size=2))

    assert seen == ["p01", "p03", "p05", "p07", "p09", "p11"]


def test_page_beyond_results_is_empty_but_counts(products: list[Product]) -> None:
    repo = InMemoryProductCatalogRepository(products)

    result = repo.search(CatalogFilter(page=10, page_size=12))

    assert result.products == []
    assert result.total_count == 5


def test_empty_repository() -> None:
    repo = InMemoryProductCatalogRepository([])

    result = repo.search(CatalogFilter())

    assert result.products == []
    assert result.total_count == 0


# ==============================================================================
# get_by_id
# ==============================================================================


def test_get_by_id_returns_active_product(products: list[Product]) -> None:
    repo = InMemoryProductCatalogRepository(products)

    product = repo.get_by_id("p3")

    assert product is not None
    assert product.name == "Furadeira de Impacto 650W"


def test_get_by_id_hides_inactive_and_unknown(products: list[Product]) -> None:
    repo = InMemoryProductCatalogRepository(products)

    assert repo.get_by_id("p6") is None
    assert repo.get_by_id("missing") is None


# ==============================================================================
# Catalog Scenarios
# ==============================================================================


def test_category_listing_sorted_by_price() -> None:
    repo = InMemoryProductCatalogRepository(
        [
            Product(id="a", name="Cabo PP", sku="A", price=Decimal("10"), category_id="cat-1"),
            Product(id="b", name="Cabo PP", sku="B", price=Decimal("30"), category_id="cat-1"),
            Product(id="c", name="Cabo PP", sku="C", price=Decimal("20"), category_id="cat-1"),
            Product(id="d", name="Tubo", sku="D", price=Decimal("5"), category_id="cat-2"),
        ]
    )

    result = repo.search(
        CatalogFilter(
            category_ids={"cat-1"},
            page=1,
            page_size=12,
            sort_field=SortField.PRICE,
            sort_direction=SortDirection.ASC,
        )
    )

    assert [p.price for p in result.products] == [Decimal("10"), Decimal("20"), Decimal("30")]
    assert result.total_count == 3


def test_offers_listing_with_no_discounts_is_empty(products: list[Product]) -> None:
    undiscounted = [p for p in products if not p.is_on_offer]
    repo = InMemoryProductCatalogRepository(undiscounted)

    result = repo.search(CatalogFilter(only_offers=True))

    assert result.products == []
    assert result.total_count == 0


@pytest.mark.parametrize("page_size", [1, 2, 12])
def test_search_total_ignores_page_size(page_size: int) -> None:
    names = [
        "Disjuntor DIN 10A",
        "Mini Disjuntor 32A",
        "Interruptor Simples",
        "Tomada 20A",
        "Fita Isolante 20m",
        "Luva de Correr 25mm",
        "Plafon LED 18W",
    ]
    repo = InMemoryProductCatalogRepository(
        [
            Product(id=f"p{i}", name=name, sku=f"SKU-{i}", price=Decimal("9.90"))
            for i, name in enumerate(names)
        ]
    )

    result = repo.search(CatalogFilter(search_text="disjuntor", page_size=page_size))

    assert result.total_count == 2
    assert len(result.products) == min(page_size, 2)


# ==============================================================================
# Case Folding
# ==============================================================================


def _folding_repo() -> InMemoryProductCatalogRepository:
    return InMemoryProductCatalogRepository(
        [
            Product(id="a", name="Abraçadeira Straße", sku="ABR-1", price=Decimal("3.50")),
            Product(id="b", name="Abraçadeira Strasse Z", sku="ABR-2", price=Decimal("3.50")),
        ]
    )


def test_name_sort_folds_case_like_sql_lower() -> None:
    # lower() keeps "ß", which sorts after "s"; casefold() would expand it to "ss"
    ids = _ids(_folding_repo(), CatalogFilter(sort_field=SortField.NAME))

    assert ids == ["b", "a"]


def test_search_folds_case_like_sql_lower() -> None:
    ids = _ids(_folding_repo(), CatalogFilter(search_text="STRASSE"))

    assert ids == ["b"]
