"""In-memory storage shared by the in-memory repositories."""

import asyncio
from typing import Optional
from uuid import UUID

from domain.entities import Product, Coupon, ProductDiscount, code_key, name_key


class InMemoryStore:
    """
    Keyed containers for products, coupons and discount applications.

    One instance is built at startup and handed to every in-memory
    repository. The single lock serialises every read and write, so a
    discount application sees a consistent snapshot of all three containers.
    """

    def __init__(self) -> None:
        self.products: dict[UUID, Product] = {}
        self.coupons: dict[UUID, Coupon] = {}
        self.discounts: list[ProductDiscount] = []
        self.lock = asyncio.Lock()

    # Soft-delete filtering lives here and nowhere else
    def live_product(self, product_id: Optional[UUID]) -> Optional[Product]:
        product = self.products.get(product_id) if product_id else None
        if product is None or product.is_deleted:
            return None
        return product

    def live_products(self) -> list[Product]:
        return [p for p in self.products.values() if not p.is_deleted]

    def live_product_named(self, name: str) -> Optional[Product]:
        key = name_key(name)
        return next((p for p in self.live_products() if p.name_key == key), None)

    def live_coupon(self, code: str) -> Optional[Coupon]:
        key = code_key(code)
        return next(
            (c for c in self.coupons.values() if not c.is_deleted and c.code_key == key),
            None,
        )

    def live_coupons(self) -> list[Coupon]:
        return [c for c in self.coupons.values() if not c.is_deleted]

    def active_discount(self, product_id: UUID) -> Optional[ProductDiscount]:
        return next(
            (d for d in self.discounts if d.product_id == product_id and d.is_active),
            None,
        )

