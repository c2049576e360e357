"""Use Case for removing a product's discount."""

from typing import Optional

from domain.repositories import IDiscountRepository
from domain.services import IdLike
from infrastructure.config import get_logger


class RemoveDiscountUseCase:
    """
    Close the active discount of a product.

    With a coupon code only that coupon's application is closed; without one,
    whatever discount is active is closed.
    """

    def __init__(self, discount_repository: IDiscountRepository):
        self.discount_repo = discount_repository
        self.logger = get_logger(self.__class__.__name__)

    async def execute(self, product_id: IdLike, coupon_code: Optional[str] = None) -> None:
        if coupon_code:
            self.logger.info(
                "➖ Removing coupon",
                extra={"product_id": product_id, "coupon_code": coupon_code},
            )
            await self.discount_repo.remove_coupon(product_id, coupon_code)
        else:
            self.logger.info("➖ Removing active discount", extra={"product_id": product_id})
            await self.discount_repo.remove_active_discount(product_id)
