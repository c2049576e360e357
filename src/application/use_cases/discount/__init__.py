"""Discount use cases."""

from .apply_coupon_discount import ApplyCouponDiscountUseCase
from .apply_percent_discount import ApplyPercentDiscountUseCase
from .remove_discount import RemoveDiscountUseCase

__all__ = [
    "ApplyCouponDiscountUseCase",
    "ApplyPercentDiscountUseCase",
    "RemoveDiscountUseCase",
]
