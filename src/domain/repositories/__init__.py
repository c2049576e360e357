"""Domain Repository Interfaces - Abstract definitions."""

from .product_repository import IProductRepository
from .coupon_repository import ICouponRepository
from .discount_repository import IDiscountRepository

__all__ = ["IProductRepository", "ICouponRepository", "IDiscountRepository"]
