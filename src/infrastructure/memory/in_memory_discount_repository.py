"""In-memory implementation of discount repository."""

from dataclasses import replace
from typing import Iterable, Optional
from uuid import UUID

from domain.entities import ProductDiscount, ActiveDiscount, code_key
from domain.enums import CouponType
from domain.exceptions import NotFoundError, ConflictError, UnprocessableStateError
from domain.repositories import IDiscountRepository
from domain.services import (
    IdLike,
    coerce_uuid,
    utc_now,
    ensure_min_price,
    percentage_to_basis_points,
)
from infrastructure.config import get_logger

from .store import InMemoryStore

PRODUCT_NOT_FOUND = "Product not found"
COUPON_NOT_FOUND = "Coupon not found"
ACTIVE_DISCOUNT_EXISTS = "Product already has an active coupon"
COUPON_NOT_VALID = "Coupon is not valid"
NO_ACTIVE_COUPON = "No active coupon found for product"
NO_ACTIVE_DISCOUNT = "No active discount found for product"


class InMemoryDiscountRepository(IDiscountRepository):
    """
    IDiscountRepository backed by an InMemoryStore.

    Every check and mutation of one operation happens while holding the
    store lock, with no suspension point in between, so concurrent applies
    can neither both succeed on one product nor overshoot max_uses.
    """

    def __init__(self, store: InMemoryStore):
        self.store = store
        self.logger = get_logger(self.__class__.__name__)

    async def apply_coupon(self, product_id: IdLike, coupon_code: str) -> ProductDiscount:
        async with self.store.lock:
            product = self._get_live_product(product_id)

            coupon = self.store.live_coupon(coupon_code)
            if coupon is None:
                raise NotFoundError(COUPON_NOT_FOUND)
            if not coupon.is_valid_at(utc_now()):
                raise UnprocessableStateError(COUPON_NOT_VALID)
            ensure_min_price(product.price, coupon.type, coupon.value)

            self._assert_no_active(product.id)

            application = ProductDiscount(product_id=product.id, coupon_id=coupon.id)
            self.store.discounts.append(application)
            coupon.uses_count += 1

            self.logger.info(f"🏷️ Coupon {coupon.code} applied to product {product.id}")
            return replace(application)

    async def apply_percentage(self, product_id: IdLike, percentage: int) -> ProductDiscount:
        async with self.store.lock:
            product = self._get_live_product(product_id)
            ensure_min_price(product.price, CouponType.PERCENT, percentage_to_basis_points(percentage))
            self._assert_no_active(product.id)

            application = ProductDiscount(product_id=product.id, percentage=percentage)
            self.store.discounts.append(application)

            self.logger.info(f"🏷️ {percentage}% discount applied to product {product.id}")
            return replace(application)

    async def remove_coupon(self, product_id: IdLike, coupon_code: str) -> None:
        pid = coerce_uuid(product_id)
        key = code_key(coupon_code)

        async with self.store.lock:
            application = self.store.active_discount(pid) if pid else None
            coupon = (
                self.store.coupons.get(application.coupon_id)
                if application is not None and application.coupon_id is not None
                else None
            )
            if coupon is None or coupon.code_key != key:
                raise NotFoundError(NO_ACTIVE_COUPON)

            application.removed_at = utc_now()

    async def remove_active_discount(self, product_id: IdLike) -> None:
        pid = coerce_uuid(product_id)

        async with self.store.lock:
            application = self.store.active_discount(pid) if pid else None
            if application is None:
                raise NotFoundError(NO_ACTIVE_DISCOUNT)

            application.removed_at = utc_now()

    async def find_active_discount(self, product_id: IdLike) -> Optional[ActiveDiscount]:
        pid = coerce_uuid(product_id)
        if pid is None:
            return None

        found = await self.find_active_discounts([pid])
        return found.get(pid)

    async def find_active_discounts(
        self, product_ids: Iterable[UUID]
    ) -> dict[UUID, ActiveDiscount]:
        now = utc_now()
        found: dict[UUID, ActiveDiscount] = {}

        async with self.store.lock:
            for pid in product_ids:
                application = self.store.active_discount(pid)
                if application is None:
                    continue

                coupon = None
                if application.coupon_id is not None:
                    stored = self.store.coupons.get(application.coupon_id)
                    coupon = replace(stored) if stored is not None else None
                    if coupon is None:
                        continue

                discount = ActiveDiscount(application=replace(application), coupon=coupon)
                if discount.is_current(now):
                    found[pid] = discount

        return found

    def _get_live_product(self, product_id: IdLike):
        product = self.store.live_product(coerce_uuid(product_id))
        if product is None:
            raise NotFoundError(PRODUCT_NOT_FOUND)
        return product

    def _assert_no_active(self, product_id: UUID) -> None:
        if self.store.active_discount(product_id) is not None:
            raise ConflictError(ACTIVE_DISCOUNT_EXISTS)
