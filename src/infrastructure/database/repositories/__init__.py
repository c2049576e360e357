"""Repository implementations."""

from .sqlalchemy_product_repository import SQLAlchemyProductRepository
from .sqlalchemy_coupon_repository import SQLAlchemyCouponRepository
from .sqlalchemy_discount_repository import SQLAlchemyDiscountRepository

__all__ = [
    "SQLAlchemyProductRepository",
    "SQLAlchemyCouponRepository",
    "SQLAlchemyDiscountRepository",
]
