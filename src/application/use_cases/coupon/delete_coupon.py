"""Use Case for soft-deleting a coupon."""

from domain.repositories import ICouponRepository
from infrastructure.config import get_logger


class DeleteCouponUseCase:
    """Soft-delete a coupon; its active applications are closed with it."""

    def __init__(self, coupon_repository: ICouponRepository):
        self.coupon_repo = coupon_repository
        self.logger = get_logger(self.__class__.__name__)

    async def execute(self, code: str) -> None:
        self.logger.info(f"🗑️ Deleting coupon: {code}")
        await self.coupon_repo.delete(code)
