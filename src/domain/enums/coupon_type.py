"""Coupon discount kinds."""

from enum import Enum


class CouponType(str, Enum):
    """How a coupon's value is interpreted."""

    FIXED = "fixed"
    PERCENT = "percent"

    @classmethod
    def parse(cls, raw: str) -> "CouponType":
        """Parse a coupon type case-insensitively."""
        try:
            return cls(raw.strip().lower())
        except ValueError:
            raise ValueError(f"Invalid coupon type: {raw}") from None

    def __str__(self) -> str:
        return self.value
