"""Coupon use cases."""

from .create_coupon import CreateCouponUseCase
from .get_coupon import GetCouponUseCase
from .get_all_coupons import GetAllCouponsUseCase
from .update_coupon import UpdateCouponUseCase
from .delete_coupon import DeleteCouponUseCase
from .parsing import parse_timestamp, parse_coupon_type

__all__ = [
    "CreateCouponUseCase",
    "GetCouponUseCase",
    "GetAllCouponsUseCase",
    "UpdateCouponUseCase",
    "DeleteCouponUseCase",
    "parse_timestamp",
    "parse_coupon_type",
]
