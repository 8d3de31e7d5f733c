"""
Dependency injection for FastAPI routes.

Database sessions are per-request; repositories and use cases are built
fresh for every request on top of that session.
"""

from __future__ import annotations

from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from rona_catalog.adapters.postgres_product_catalog_repository import (
    PostgresProductCatalogRepository,
)
from rona_catalog.infra.db.session import get_session
from rona_catalog.ports.product_catalog_repository import ProductCatalogRepository
from rona_catalog.use_cases.get_product_by_id import GetProductById
from rona_catalog.use_cases.search_product_catalog import SearchProductCatalog


def get_db() -> Generator[Session, None, None]:
    """
    Provides a database session for a single request.

    The underlying get_session() context manager commits on success,
    rolls back on exception and always closes the session.
    """
    with get_session() as session:
        yield session


def get_product_catalog_repository(db: Session = Depends(get_db)) -> ProductCatalogRepository:
    return PostgresProductCatalogRepository(session=db)


def get_search_catalog_use_case(
    repository: ProductCatalogRepository = Depends(get_product_catalog_repository),
) -> SearchProductCatalog:
    """
    Returns a SearchProductCatalog use case wired to the request's repository.

    Args:
        repository: Catalog repository (injected by FastAPI)
    """
    return SearchProductCatalog(product_catalog_repository=repository)


def get_get_product_by_id_use_case(
    repository: ProductCatalogRepository = Depends(get_product_catalog_repository),
) -> GetProductById:
    return GetProductById(product_catalog_repository=repository)
