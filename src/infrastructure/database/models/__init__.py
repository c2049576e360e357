"""SQLAlchemy ORM models."""

from .product_model import ProductModel
from .coupon_model import CouponModel
from .product_discount_model import ProductDiscountModel

__all__ = ["ProductModel", "CouponModel", "ProductDiscountModel"]
