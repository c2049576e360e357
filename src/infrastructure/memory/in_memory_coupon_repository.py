"""In-memory implementation of coupon repository."""

from dataclasses import replace
from datetime import datetime
from typing import Optional

from domain.entities import Coupon, NewCoupon, CouponUpdate
from domain.exceptions import NotFoundError, ConflictError
from domain.repositories import ICouponRepository
from domain.services import IdLike, coerce_uuid, utc_now, as_utc
from domain.value_objects import Page, PageRequest, paginate
from infrastructure.config import get_logger

from .store import InMemoryStore

COUPON_NOT_FOUND = "Coupon not found"
COUPON_EXISTS = "Coupon already exists"


class InMemoryCouponRepository(ICouponRepository):
    """ICouponRepository backed by an InMemoryStore."""

    def __init__(self, store: InMemoryStore):
        self.store = store
        self.logger = get_logger(self.__class__.__name__)

    async def create(self, data: NewCoupon) -> Coupon:
        async with self.store.lock:
            if self.store.live_coupon(data.code) is not None:
                raise ConflictError(COUPON_EXISTS)

            coupon = Coupon.create(data)
            self.store.coupons[coupon.id] = coupon
            return replace(coupon)

    async def find(self, code: str) -> Coupon:
        async with self.store.lock:
            return replace(self._get_live(code))

    async def find_all(
        self,
        page: PageRequest,
        search: Optional[str] = None,
        valid_from: Optional[datetime] = None,
        valid_until: Optional[datetime] = None,
        is_active: Optional[bool] = None,
    ) -> Page[Coupon]:
        now = utc_now()
        lower_bound = as_utc(valid_from) if valid_from is not None else None
        upper_bound = as_utc(valid_until) if valid_until is not None else None

        async with self.store.lock:
            matches = [replace(c) for c in self.store.live_coupons()]

        if search:
            matches = [c for c in matches if search.lower() in c.code.lower()]
        if lower_bound is not None:
            matches = [c for c in matches if c.valid_from >= lower_bound]
        if upper_bound is not None:
            matches = [c for c in matches if c.valid_until <= upper_bound]
        if is_active is not None:
            matches = [c for c in matches if c.is_within_window(now) == is_active]

        matches.sort(key=lambda c: (c.created_at, c.id), reverse=True)
        return paginate(matches, page)

    async def update(self, code: str, partial: CouponUpdate) -> Coupon:
        async with self.store.lock:
            current = self._get_live(code)
            updated = current.merged(partial)
            self.store.coupons[current.id] = updated
            return replace(updated)

    async def delete(self, code: str) -> None:
        async with self.store.lock:
            coupon = self._get_live(code)
            now = utc_now()
            coupon.deleted_at = now

            for application in self.store.discounts:
                if application.coupon_id == coupon.id and application.is_active:
                    application.removed_at = now

    async def find_valid_coupon_by_code(self, code: str) -> Coupon:
        async with self.store.lock:
            coupon = self.store.live_coupon(code)
            if coupon is None or not coupon.is_valid_at(utc_now()):
                raise NotFoundError(COUPON_NOT_FOUND)
            return replace(coupon)

    async def increment_uses(self, coupon_id: IdLike) -> None:
        async with self.store.lock:
            coupon = self.store.coupons.get(coerce_uuid(coupon_id))
            if coupon is None:
                self.logger.warning(f"⚠️ Ignoring usage increment for unknown coupon: {coupon_id}")
                return
            coupon.uses_count += 1

    def _get_live(self, code: str) -> Coupon:
        coupon = self.store.live_coupon(code)
        if coupon is None:
            raise NotFoundError(COUPON_NOT_FOUND)
        return coupon
