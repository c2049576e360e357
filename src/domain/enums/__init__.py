"""Domain Enums - Constant values used across the domain."""

from .coupon_type import CouponType

__all__ = ["CouponType"]
