"""Domain Entities - Objects with identity."""

from .product import Product, NewProduct, ProductUpdate, normalize_name, name_key
from .coupon import Coupon, NewCoupon, CouponUpdate, code_key
from .product_discount import (
    ProductDiscount,
    ActiveDiscount,
    validate_percentage,
    PERCENTAGE_MIN,
    PERCENTAGE_MAX,
)
from .product_view import ProductView

__all__ = [
    "Product",
    "NewProduct",
    "ProductUpdate",
    "normalize_name",
    "name_key",
    "Coupon",
    "NewCoupon",
    "CouponUpdate",
    "code_key",
    "ProductDiscount",
    "ActiveDiscount",
    "validate_percentage",
    "PERCENTAGE_MIN",
    "PERCENTAGE_MAX",
    "ProductView",
]
