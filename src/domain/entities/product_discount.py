"""Discount applications attached to products."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from domain.enums import CouponType
from domain.exceptions import ValidationFailedError
from domain.services import utc_now, final_price, percentage_to_basis_points

from .coupon import Coupon

PERCENTAGE_MIN = 1
PERCENTAGE_MAX = 80


def validate_percentage(percentage: int) -> None:
    if not PERCENTAGE_MIN <= percentage <= PERCENTAGE_MAX:
        raise ValidationFailedError(
            f"percentage must be between {PERCENTAGE_MIN} and {PERCENTAGE_MAX}"
        )


@dataclass
class ProductDiscount:
    """
    One application of a discount to a product.

    Either coupon_id (coupon application) or percentage (direct whole-percent
    discount) is set. Rows are closed by setting removed_at, never deleted.
    """

    product_id: UUID
    coupon_id: Optional[UUID] = None
    percentage: Optional[int] = None
    id: UUID = field(default_factory=uuid4)
    applied_at: datetime = field(default_factory=utc_now)
    removed_at: Optional[datetime] = None

    @property
    def is_active(self) -> bool:
        return self.removed_at is None


@dataclass(frozen=True)
class ActiveDiscount:
    """An active application joined with its coupon, if any."""

    application: ProductDiscount
    coupon: Optional[Coupon] = None

    @property
    def discount_type(self) -> CouponType:
        if self.coupon is not None:
            return self.coupon.type
        return CouponType.PERCENT

    @property
    def value(self) -> int:
        """Coupon value, or the direct percentage expressed in basis points."""
        if self.coupon is not None:
            return self.coupon.value
        return percentage_to_basis_points(self.application.percentage or 0)

    @property
    def code(self) -> Optional[str]:
        return self.coupon.code if self.coupon is not None else None

    @property
    def applied_at(self) -> datetime:
        return self.application.applied_at

    def final_price(self, price: int) -> int:
        return final_price(price, self.discount_type, self.value)

    def is_current(self, now: datetime) -> bool:
        """Direct percentages stay current while active; coupons need a live window."""
        if self.coupon is None:
            return True
        return not self.coupon.is_deleted and self.coupon.is_within_window(now)
