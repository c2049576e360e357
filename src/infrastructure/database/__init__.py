"""Database infrastructure module."""

from .session import Base, Database
from .models import ProductModel, CouponModel, ProductDiscountModel

__all__ = [
    "Base",
    "Database",
    "ProductModel",
    "CouponModel",
    "ProductDiscountModel",
]
