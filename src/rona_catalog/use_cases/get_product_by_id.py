"""Get product by ID use case."""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from rona_catalog.domain.errors import NotFoundError, ValidationError
from rona_catalog.domain.product import Product
from rona_catalog.ports.product_catalog_repository import ProductCatalogRepository


@dataclass(frozen=True, slots=True)
class GetProductByIdRequest:
    product_id: str


@dataclass(frozen=True, slots=True)
class GetProductByIdResponse:
    product: Product


class GetProductById:
    """
    Use case for retrieving a single product for the product detail page.

    Responsibilities:
    - Validate product_id format (must be valid UUID)
    - Delegate to repository for data access
    - Raise NotFoundError if the product doesn't exist or is inactive
    """

    def __init__(self, product_catalog_repository: ProductCatalogRepository) -> None:
        self._repository = product_catalog_repository

    def execute(self, request: GetProductByIdRequest) -> GetProductByIdResponse:
        """
        Raises:
            ValidationError: If product_id is not a valid UUID format
            NotFoundError: If no active product has the given ID
        """
        try:
            UUID(request.product_id)
        except ValueError:
            raise ValidationError(
                errors=[
                    {
                        "field": "product_id",
                        "message": "Must be a valid UUID format",
                        "code": "INVALID_UUID",
                    }
                ]
            )

        product = self._repository.get_by_id(request.product_id)

        if product is None:
            raise NotFoundError(resource="Product", identifier=request.product_id)

        return GetProductByIdResponse(product=product)
