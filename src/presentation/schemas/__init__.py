"""Pydantic schemas for request/response validation."""

from .common_schemas import (
    HealthResponse,
    ErrorResponse,
    PaginationMetaResponse,
    PatchOperationResponse,
)
from .product_schemas import (
    CreateProductRequest,
    UpdateProductRequest,
    ProductListQuery,
    DiscountInfoResponse,
    ProductResponse,
    ProductListResponse,
    ApplyCouponRequest,
    RemoveDiscountRequest,
    ApplyPercentDiscountRequest,
)
from .coupon_schemas import (
    CreateCouponRequest,
    UpdateCouponRequest,
    CouponListQuery,
    CouponResponse,
    CouponListResponse,
)

__all__ = [
    "HealthResponse",
    "ErrorResponse",
    "PaginationMetaResponse",
    "PatchOperationResponse",
    "CreateProductRequest",
    "UpdateProductRequest",
    "ProductListQuery",
    "DiscountInfoResponse",
    "ProductResponse",
    "ProductListResponse",
    "ApplyCouponRequest",
    "RemoveDiscountRequest",
    "ApplyPercentDiscountRequest",
    "CreateCouponRequest",
    "UpdateCouponRequest",
    "CouponListQuery",
    "CouponResponse",
    "CouponListResponse",
]
