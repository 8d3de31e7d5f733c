from __future__ import annotations

from decimal import Decimal
from unittest.mock import Mock

import pytest

from rona_catalog.domain.errors import NotFoundError, ValidationError
from rona_catalog.domain.product import Product
from rona_catalog.ports.product_catalog_repository import ProductCatalogRepository
from rona_catalog.use_cases.get_product_by_id import (
    GetProductById,
    GetProductByIdRequest,
    GetProductByIdResponse,
)

PRODUCT_ID = "7d3c5a52-8f2e-4c55-9a4e-1f0b7f5e2c11"


@pytest.fixture()
def mock_repository() -> Mock:
    return Mock(spec=ProductCatalogRepository)


def test_execute_returns_product(mock_repository: Mock) -> None:
    product = Product(id=PRODUCT_ID, name="Registro de Gaveta 3/4", sku="RG-34", price=Decimal("39.90"))
    mock_repository.get_by_id.return_value = product

    response = GetProductById(mock_repository).execute(GetProductByIdRequest(product_id=PRODUCT_ID))

    assert isinstance(response, GetProductByIdResponse)
    assert response.product == product
    mock_repository.get_by_id.assert_called_once_with(PRODUCT_ID)


def test_execute_raises_not_found(mock_repository: Mock) -> None:
    mock_repository.get_by_id.return_value = None

    with pytest.raises(NotFoundError) as exc_info:
        GetProductById(mock_repository).execute(GetProductByIdRequest(product_id=PRODUCT_ID))

    assert exc_info.value.context == {"resource": "Product", "identifier": PRODUCT_ID}


def test_execute_rejects_malformed_id(mock_repository: Mock) -> None:
    with pytest.raises(ValidationError) as exc_info:
        GetProductById(mock_repository).execute(GetProductByIdRequest(product_id="abc"))

    assert exc_info.value.errors == [
        {"field": "product_id", "message": "Must be a valid UUID format", "code": "INVALID_UUID"}
    ]
    mock_repository.get_by_id.assert_not_called()
