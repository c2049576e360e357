"""Product-related Pydantic schemas."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from domain.entities import ProductView

from .common_schemas import PaginationMetaResponse


class CreateProductRequest(BaseModel):
    """Request schema for creating a product. Types are not coerced."""

    model_config = ConfigDict(
        strict=True,
        json_schema_extra={
            "examples": [
                {
                    "name": "Mechanical Keyboard",
                    "description": "Hot-swappable, 75% layout",
                    "stock": 250,
                    "price": 2590
                }
            ]
        },
    )

    name: str = Field(..., description="Product name, 1-100 characters")
    description: Optional[str] = Field(None, description="Up to 300 characters")
    stock: int = Field(..., description="Units in stock, 0-999999")
    price: int = Field(..., description="Price in cents, at least 1")


class UpdateProductRequest(BaseModel):
    """Request schema for a partial product update."""

    model_config = ConfigDict(
        strict=True,
        json_schema_extra={"examples": [{"stock": 120}]},
    )

    name: Optional[str] = Field(None, description="New name")
    description: Optional[str] = Field(None, description="New description")
    stock: Optional[int] = Field(None, description="New stock")
    price: Optional[int] = Field(None, description="New price in cents")


class ProductListQuery(BaseModel):
    """Query parameters of the product listing. Strings are coerced."""

    page: int = Field(1, ge=1)
    limit: int = Field(10, ge=1, le=100)
    search: Optional[str] = None
    min_price: Optional[int] = Field(None, ge=0)
    max_price: Optional[int] = Field(None, ge=0)
    has_discount: Optional[bool] = None


class DiscountInfoResponse(BaseModel):
    """Discount currently applied to a product."""

    type: str = Field(..., description="fixed or percent")
    value: int = Field(..., description="Cents for fixed, basis points for percent")
    code: Optional[str] = Field(None, description="Coupon code; null for direct percentages")
    applied_at: datetime


class ProductResponse(BaseModel):
    """Product with its effective price."""

    id: UUID
    name: str
    description: Optional[str] = None
    stock: int
    is_out_of_stock: bool
    price: int
    final_price: int
    discount: Optional[DiscountInfoResponse] = None
    has_coupon_applied: bool
    created_at: datetime
    updated_at: Optional[datetime] = None

    @classmethod
    def from_view(cls, view: ProductView) -> "ProductResponse":
        product = view.product
        discount = None
        if view.discount is not None:
            discount = DiscountInfoResponse(
                type=view.discount.discount_type.value,
                value=view.discount.value,
                code=view.discount.code,
                applied_at=view.discount.applied_at,
            )

        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            stock=product.stock,
            is_out_of_stock=view.is_out_of_stock,
            price=product.price,
            final_price=view.final_price,
            discount=discount,
            has_coupon_applied=view.has_coupon_applied,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )


class ProductListResponse(BaseModel):
    """Paginated product listing."""

    data: list[ProductResponse]
    meta: PaginationMetaResponse


class ApplyCouponRequest(BaseModel):
    """Request schema for applying a coupon to a product."""

    model_config = ConfigDict(strict=True)

    code: str = Field(..., description="Coupon code")


class RemoveDiscountRequest(BaseModel):
    """Optional body of the discount removal; without a code any discount is removed."""

    model_config = ConfigDict(strict=True)

    code: Optional[str] = Field(None, description="Coupon code to remove")


class ApplyPercentDiscountRequest(BaseModel):
    """Request schema for a direct percentage discount."""

    model_config = ConfigDict(strict=True)

    percentage: int = Field(..., description="Whole percent, 1-80")
