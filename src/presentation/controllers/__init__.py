"""Transport-independent controllers."""

from .base import (
    StatusCode,
    AdapterRequest,
    AdapterResponse,
    GenericController,
    RequestRejected,
)
from .product_controllers import (
    CreateProductController,
    GetProductController,
    GetProductsController,
    UpdateProductController,
    DeleteProductController,
    RestoreProductController,
)
from .coupon_controllers import (
    CreateCouponController,
    GetCouponController,
    GetCouponsController,
    UpdateCouponController,
    DeleteCouponController,
)
from .discount_controllers import (
    ApplyCouponController,
    ApplyPercentDiscountController,
    RemoveDiscountController,
)

__all__ = [
    "StatusCode",
    "AdapterRequest",
    "AdapterResponse",
    "GenericController",
    "RequestRejected",
    "CreateProductController",
    "GetProductController",
    "GetProductsController",
    "UpdateProductController",
    "DeleteProductController",
    "RestoreProductController",
    "CreateCouponController",
    "GetCouponController",
    "GetCouponsController",
    "UpdateCouponController",
    "DeleteCouponController",
    "ApplyCouponController",
    "ApplyPercentDiscountController",
    "RemoveDiscountController",
]
