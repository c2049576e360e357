"""Coupon repository interface - Abstract definition."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from domain.entities import Coupon, NewCoupon, CouponUpdate
from domain.services import IdLike
from domain.value_objects import Page, PageRequest


class ICouponRepository(ABC):
    """
    Abstract repository interface for Coupon entity.

    Coupons are addressed by code, compared case-insensitively.
    Soft-deleted coupons are invisible to every method.
    """

    @abstractmethod
    async def create(self, data: NewCoupon) -> Coupon:
        """
        Create a new coupon.

        Raises:
            ConflictError: If a live coupon has the same code
        """
        pass

    @abstractmethod
    async def find(self, code: str) -> Coupon:
        """
        Retrieve a live coupon by code.

        Raises:
            NotFoundError: If absent or soft-deleted
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        page: PageRequest,
        search: Optional[str] = None,
        valid_from: Optional[datetime] = None,
        valid_until: Optional[datetime] = None,
        is_active: Optional[bool] = None,
    ) -> Page[Coupon]:
        """
        List live coupons, newest first.

        Args:
            page: Requested page window
            search: Case-insensitive substring of the code
            valid_from: Keep coupons starting at or after this instant
            valid_until: Keep coupons ending at or before this instant
            is_active: True keeps coupons whose window contains now,
                False keeps the rest

        Returns:
            Page of coupons with pagination metadata
        """
        pass

    @abstractmethod
    async def update(self, code: str, partial: CouponUpdate) -> Coupon:
        """
        Apply a partial update and refresh updated_at.

        Raises:
            NotFoundError: If absent or soft-deleted
            ValidationFailedError: If the merged value or window is invalid
        """
        pass

    @abstractmethod
    async def delete(self, code: str) -> None:
        """
        Soft-delete a coupon.

        Raises:
            NotFoundError: If absent or already deleted
        """
        pass

    @abstractmethod
    async def find_valid_coupon_by_code(self, code: str) -> Coupon:
        """
        Retrieve a coupon only if it is usable right now.

        Usable means live, inside [valid_from, valid_until] and below max_uses,
        as decided by Coupon.is_valid_at. apply_coupon re-checks the same rule
        under its own lock and does not go through this method.

        Raises:
            NotFoundError: If absent, deleted or not currently usable
        """
        pass

    @abstractmethod
    async def increment_uses(self, coupon_id: IdLike) -> None:
        """
        Add one to uses_count.

        Best effort: an unknown or malformed id is ignored. apply_coupon counts
        its use inside the apply transaction instead of calling this.
        """
        pass
