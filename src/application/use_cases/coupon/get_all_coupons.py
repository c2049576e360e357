"""Use Case for listing coupons."""

from typing import Optional

from domain.entities import Coupon
from domain.repositories import ICouponRepository
from domain.value_objects import Page, PageRequest
from infrastructure.config import get_logger

from .parsing import TimestampLike, parse_optional_timestamp


class GetAllCouponsUseCase:
    """Filtered, paginated coupon listing."""

    def __init__(self, coupon_repository: ICouponRepository):
        self.coupon_repo = coupon_repository
        self.logger = get_logger(self.__class__.__name__)

    async def execute(
        self,
        page: int = 1,
        limit: int = 10,
        search: Optional[str] = None,
        valid_from: Optional[TimestampLike] = None,
        valid_until: Optional[TimestampLike] = None,
        is_active: Optional[bool] = None,
    ) -> Page[Coupon]:
        request = PageRequest(page=page, limit=limit)
        self.logger.info(f"📄 Listing coupons page={page} limit={limit}")

        return await self.coupon_repo.find_all(
            request,
            search=search,
            valid_from=parse_optional_timestamp("valid_from", valid_from),
            valid_until=parse_optional_timestamp("valid_until", valid_until),
            is_active=is_active,
        )
