"""Use Case for reading one coupon."""

from domain.entities import Coupon
from domain.repositories import ICouponRepository
from infrastructure.config import get_logger


class GetCouponUseCase:

    def __init__(self, coupon_repository: ICouponRepository):
        self.coupon_repo = coupon_repository
        self.logger = get_logger(self.__class__.__name__)

    async def execute(self, code: str) -> Coupon:
        self.logger.info(f"🔎 Fetching coupon: {code}")
        return await self.coupon_repo.find(code)
