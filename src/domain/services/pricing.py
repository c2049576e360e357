"""Price computation for discounted products.

Percent values are basis points out of 10000 (2000 means 20%). Fixed values
are in the smallest currency unit. A final price never drops below MIN_PRICE.
"""

from domain.enums import CouponType
from domain.exceptions import UnprocessableStateError

MIN_PRICE = 1
BASIS_POINTS = 10_000
BELOW_MIN_PRICE = "Final price must be at least 1 cent"


def raw_discounted_price(price: int, discount_type: CouponType, value: int) -> int:
    """Price after the discount, without the minimum floor. May be below 1."""
    if discount_type == CouponType.PERCENT:
        return price - (price * value) // BASIS_POINTS
    return price - value


def final_price(price: int, discount_type: CouponType, value: int) -> int:
    """Price after the discount, floored at MIN_PRICE."""
    return max(raw_discounted_price(price, discount_type, value), MIN_PRICE)


def percentage_to_basis_points(percentage: int) -> int:
    return percentage * 100


def ensure_min_price(price: int, discount_type: CouponType, value: int) -> None:
    """Refuse a discount that would price the product below MIN_PRICE."""
    if raw_discounted_price(price, discount_type, value) < MIN_PRICE:
        raise UnprocessableStateError(BELOW_MIN_PRICE)
