"""In-memory storage backend."""

from .store import InMemoryStore
from .in_memory_product_repository import InMemoryProductRepository
from .in_memory_coupon_repository import InMemoryCouponRepository
from .in_memory_discount_repository import InMemoryDiscountRepository

__all__ = [
    "InMemoryStore",
    "InMemoryProductRepository",
    "InMemoryCouponRepository",
    "InMemoryDiscountRepository",
]
