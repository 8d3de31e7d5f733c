from pydantic import BaseModel, ConfigDict, Field

from rona_catalog.domain.product import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, SortDirection, SortField


class ProductResponseDTO(BaseModel):
    id: str
    name: str
    sku: str
    price: str
    compare_price: str | None = None
    is_on_offer: bool
    discount_percentage: str
    stock_quantity: int
    category_id: str | None = None
    brand_id: str | None = None
    description: str | None = None
    is_featured: bool
    image_urls: list[str]
    rating: str | None = None


class ProductSearchQueryDTO(BaseModel):
    """Query parameters for searching the product catalog."""

    page: int = Field(
        default=1,
        description="Page number, starting at 1",
        examples=[1],
        ge=1,
    )
    limit: int = Field(
        default=DEFAULT_PAGE_SIZE,
        description="Products per page",
        examples=[DEFAULT_PAGE_SIZE],
        ge=1,
        le=MAX_PAGE_SIZE,
    )
    category: list[str] = Field(
        default_factory=list,
        description="Category ids (repeat the parameter for several; any may match)",
        examples=[["cat-fios-e-cabos"]],
    )
    brand: list[str] = Field(
        default_factory=list,
        description="Brand ids (repeat the parameter for several; any may match)",
        examples=[["brand-schneider"]],
    )
    search: str | None = Field(
        default=None,
        description="Case-insensitive text matched against name, description and SKU",
        examples=["disjuntor"],
    )
    min_price: str | None = Field(
        default=None,
        description="Minimum price (inclusive, plain decimal string)",
        examples=["10.00"],
        pattern=r"^\d+(\.\d+)?$",
    )
    max_price: str | None = Field(
        default=None,
        description="Maximum price (inclusive, plain decimal string)",
        examples=["250.00"],
        pattern=r"^\d+(\.\d+)?$",
    )
    sort_by: SortField = Field(
        default=SortField.RELEVANCE,
        description="Sort field; ties are always broken by product id",
    )
    sort_order: SortDirection = Field(
        default=SortDirection.ASC,
        description="Sort direction (ignored for relevance)",
    )
    featured: bool = Field(default=False, description="Only featured products")
    offers: bool = Field(default=False, description="Only products with an active discount")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "page": 1,
                "limit": 12,
                "category": ["cat-disjuntores"],
                "search": "disjuntor",
                "min_price": "10.00",
                "max_price": "250.00",
                "sort_by": "price",
                "sort_order": "asc",
                "offers": False,
            }
        }
    )


class PaginationDTO(BaseModel):
    page: int
    limit: int
    total: int
    pages: int


class ProductSearchResponseDTO(BaseModel):
    items: list[ProductResponseDTO]
    pagination: PaginationDTO
