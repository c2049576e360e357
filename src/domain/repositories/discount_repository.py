"""Discount repository interface - Abstract definition."""

from abc import ABC, abstractmethod
from typing import Iterable, Optional
from uuid import UUID

from domain.entities import ProductDiscount, ActiveDiscount
from domain.services import IdLike


class IDiscountRepository(ABC):
    """
    Abstract repository interface for product discount applications.

    A product has at most one active application (removed_at unset).
    Apply and remove operations are atomic: on failure nothing is persisted.
    """

    @abstractmethod
    async def apply_coupon(self, product_id: IdLike, coupon_code: str) -> ProductDiscount:
        """
        Attach a coupon to a product and count one use of the coupon.

        Args:
            product_id: Product UUID
            coupon_code: Coupon code, case-insensitive

        Returns:
            The new active application

        Raises:
            NotFoundError: If the product or coupon is absent or deleted
            UnprocessableStateError: If the coupon is outside its window,
                has reached max_uses, or would price the product below
                MIN_PRICE
            ConflictError: If the product already has an active discount
        """
        pass

    @abstractmethod
    async def apply_percentage(self, product_id: IdLike, percentage: int) -> ProductDiscount:
        """
        Attach a direct whole-percent discount to a product.

        Raises:
            NotFoundError: If the product is absent or deleted
            UnprocessableStateError: If the product would drop below MIN_PRICE
            ConflictError: If the product already has an active discount
        """
        pass

    @abstractmethod
    async def remove_coupon(self, product_id: IdLike, coupon_code: str) -> None:
        """
        Close the active application of the given coupon on the product.

        Raises:
            NotFoundError: If no active application matches
        """
        pass

    @abstractmethod
    async def remove_active_discount(self, product_id: IdLike) -> None:
        """
        Close whichever discount is active on the product.

        Raises:
            NotFoundError: If the product has no active discount
        """
        pass

    @abstractmethod
    async def find_active_discount(self, product_id: IdLike) -> Optional[ActiveDiscount]:
        """
        Return the active, currently valid discount of a product.

        Coupon applications count only while the coupon is live and inside
        its window.

        Returns:
            ActiveDiscount if present, None otherwise
        """
        pass

    @abstractmethod
    async def find_active_discounts(
        self, product_ids: Iterable[UUID]
    ) -> dict[UUID, ActiveDiscount]:
        """
        Batch form of find_active_discount.

        Returns:
            Mapping of product ID to its discount; products without one are omitted
        """
        pass
