"""REST API error response models.

Every error answered by the catalog API has this shape, whether it comes
from a domain error, a request validation failure or an unexpected crash.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Field-level error, used when several query parameters fail at once."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "min_price",
                "message": "String should match pattern '^\\d+(\\.\\d+)?$'",
                "code": "string_pattern_mismatch",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Simple error:
            {"detail": "Product with identifier '...' not found", "code": "NOT_FOUND"}

        Validation error with field errors:
            {
                "detail": "Invalid request parameters",
                "code": "VALIDATION_ERROR",
                "errors": [{"field": "limit", "message": "...", "code": "less_than_equal"}]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "min_price cannot be greater than max_price", "code": "VALIDATION_ERROR"},
                {"detail": "Product with identifier 'x' not found", "code": "NOT_FOUND"},
                {"detail": "Catalog storage unavailable", "code": "TRANSPORT_ERROR"},
            ]
        }
    )
