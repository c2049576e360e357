"""Domain Services - Stateless rules shared across entities."""

from .clock import utc_now, as_utc
from .identifiers import IdLike, coerce_uuid
from .pricing import (
    MIN_PRICE,
    BASIS_POINTS,
    BELOW_MIN_PRICE,
    raw_discounted_price,
    final_price,
    ensure_min_price,
    percentage_to_basis_points,
)

__all__ = [
    "utc_now",
    "as_utc",
    "IdLike",
    "coerce_uuid",
    "MIN_PRICE",
    "BASIS_POINTS",
    "BELOW_MIN_PRICE",
    "raw_discounted_price",
    "final_price",
    "ensure_min_price",
    "percentage_to_basis_points",
]
