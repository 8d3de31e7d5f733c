"""PostgreSQL implementation of ProductCatalogRepository."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from uuid import UUID

from sqlalchemy import and_, case, func, or_, select
from sqlalchemy.orm import Session

from rona_catalog.domain.product import CatalogFilter, Product, SortDirection, SortField
from rona_catalog.infra.db.models.product import ProductRow
from rona_catalog.ports.product_catalog_repository import ProductCatalogRepository, SearchResult

if TYPE_CHECKING:
    from sqlalchemy.sql import Select


_on_offer = and_(ProductRow.compare_price.is_not(None), ProductRow.compare_price > ProductRow.price)

_discount_percentage = case(
    (_on_offer, (ProductRow.compare_price - ProductRow.price) * 100 / ProductRow.compare_price),
    else_=0,
)


class PostgresProductCatalogRepository(ProductCatalogRepository):
    """
    PostgreSQL implementation of ProductCatalogRepository.

    - Uses SQLAlchemy ORM for database access
    - Applies filters using SQL WHERE clauses
    - Returns total_count via COUNT(*) query
    - Orders by the requested field, then id ASC
    - Converts ProductRow (infrastructure) to Product (domain)
    """

    def __init__(self, session: Session) -> None:
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self._session = session

    def search(self, catalog_filter: CatalogFilter) -> SearchResult:
        """
        Search catalog with filters, sorting and paging.

        Executes two queries:
        1. COUNT(*) to get total matching products (before paging)
        2. SELECT with ORDER BY/OFFSET/LIMIT to get the requested page

        Args:
            catalog_filter: Filter criteria (AND semantics) - must be pre-validated

        Returns:
            SearchResult with products and total_count
        """
        query = self._build_query(catalog_filter)

        count_query = select(func.count()).select_from(query.subquery())
        total_count = self._session.execute(count_query).scalar() or 0

        query = self._apply_ordering(query, catalog_filter)
        query = query.offset(catalog_filter.offset).limit(catalog_filter.page_size)

        rows = self._session.execute(query).scalars().all()
        products = [self._to_domain(row) for row in rows]

        return SearchResult(products=products, total_count=total_count)

    def get_by_id(self, product_id: str) -> Product | None:
        """
        Get an active product by ID.

        Args:
            product_id: Product ID (expected to be a valid UUID string)

        Returns:
            Product entity if found and active, None otherwise
        """
        try:
            query = select(ProductRow).where(
                ProductRow.id == UUID(product_id),
                ProductRow.is_active.is_(True),
            )
        except ValueError:  # Invalid UUID format
            return None
        row = self._session.execute(query).scalar_one_or_none()
        return self._to_domain(row) if row else None

    def _build_query(self, catalog_filter: CatalogFilter) -> Select[tuple[ProductRow]]:
        """
        Build SQLAlchemy query with filters applied.

        Args:
            catalog_filter: Filter criteria to apply

        Returns:
            SQLAlchemy select statement with WHERE clauses
        """
        query = select(ProductRow).where(ProductRow.is_active.is_(True))

        if catalog_filter.category_ids:
            query = query.where(ProductRow.category_id.in_(sorted(catalog_filter.category_ids)))

        if catalog_filter.brand_ids:
            query = query.where(ProductRow.brand_id.in_(sorted(catalog_filter.brand_ids)))

        # Case-insensitive substring match on name, description or sku
        search = catalog_filter.normalized_search
        if search is not None:
            query = query.where(
                or_(
                    ProductRow.name.icontains(search, autoescape=True),
                    ProductRow.description.icontains(search, autoescape=True),
                    ProductRow.sku.icontains(search, autoescape=True),
                )
            )

        # Price range filters (inclusive)
        if catalog_filter.min_price is not None:
            query = query.where(ProductRow.price >= catalog_filter.min_price)
        if catalog_filter.max_price is not None:
            query = query.where(ProductRow.price <= catalog_filter.max_price)

        if catalog_filter.only_featured:
            query = query.where(ProductRow.is_featured.is_(True))

        if catalog_filter.only_offers:
            query = query.where(_on_offer)

        return query

    def _apply_ordering(
        self, query: Select[tuple[ProductRow]], catalog_filter: CatalogFilter
    ) -> Select[tuple[ProductRow]]:
        descending = catalog_filter.sort_direction is SortDirection.DESC
        order_by: list[Any]

        if catalog_filter.sort_field is SortField.PRICE:
            order_by = [ProductRow.price.desc() if descending else ProductRow.price.asc()]
        elif catalog_filter.sort_field is SortField.NAME:
            name = func.lower(ProductRow.name)
            order_by = [name.desc() if descending else name.asc()]
        elif catalog_filter.sort_field is SortField.DISCOUNT_PERCENTAGE:
            order_by = [_discount_percentage.desc() if descending else _discount_percentage.asc()]
        else:
            # Relevance: name hits first, then newest
            order_by = []
            search = catalog_filter.normalized_search
            if search is not None:
                order_by.append(
                    case((ProductRow.name.icontains(search, autoescape=True), 0), else_=1)
                )
            order_by.append(ProductRow.created_at.desc().nulls_last())

        # Stable tie-break keeps page boundaries consistent
        order_by.append(ProductRow.id.asc())
        return query.order_by(*order_by)

    def _to_domain(self, row: ProductRow) -> Product:
        """
        Convert database model (ProductRow) to domain entity (Product).

        Args:
            row: SQLAlchemy ProductRow model

        Returns:
            Product domain entity
        """
        return Product(
            id=str(row.id),  # Convert UUID to string
            name=row.name,
            sku=row.sku,
            price=row.price,  # Already Decimal from NUMERIC column
            compare_price=row.compare_price,
            stock_quantity=row.stock_quantity,
            category_id=row.category_id,
            brand_id=row.brand_id,
            description=row.description,
            is_featured=row.is_featured,
            is_active=row.is_active,
            created_at=row.created_at,
            image_urls=tuple(row.image_urls or ()),
            rating=row.rating,
        )
