"""Use cases - one class per operation, each exposing execute()."""

from .product import (
    CreateProductUseCase,
    GetProductUseCase,
    GetAllProductsUseCase,
    UpdateProductUseCase,
    DeleteProductUseCase,
    RestoreProductUseCase,
)
from .coupon import (
    CreateCouponUseCase,
    GetCouponUseCase,
    GetAllCouponsUseCase,
    UpdateCouponUseCase,
    DeleteCouponUseCase,
    parse_timestamp,
    parse_coupon_type,
)
from .discount import (
    ApplyCouponDiscountUseCase,
    ApplyPercentDiscountUseCase,
    RemoveDiscountUseCase,
)

__all__ = [
    "CreateProductUseCase",
    "GetProductUseCase",
    "GetAllProductsUseCase",
    "UpdateProductUseCase",
    "DeleteProductUseCase",
    "RestoreProductUseCase",
    "CreateCouponUseCase",
    "GetCouponUseCase",
    "GetAllCouponsUseCase",
    "UpdateCouponUseCase",
    "DeleteCouponUseCase",
    "ApplyCouponDiscountUseCase",
    "ApplyPercentDiscountUseCase",
    "RemoveDiscountUseCase",
    "parse_timestamp",
    "parse_coupon_type",
]
