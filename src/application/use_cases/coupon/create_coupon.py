"""Use Case for creating a coupon."""

from typing import Optional, Union

from domain.entities import Coupon, NewCoupon
from domain.enums import CouponType
from domain.repositories import ICouponRepository
from infrastructure.config import get_logger

from .parsing import TimestampLike, parse_timestamp, parse_coupon_type


class CreateCouponUseCase:
    """Parse, validate and store a new coupon."""

    def __init__(self, coupon_repository: ICouponRepository):
        self.coupon_repo = coupon_repository
        self.logger = get_logger(self.__class__.__name__)

    async def execute(
        self,
        code: str,
        coupon_type: Union[str, CouponType],
        value: int,
        one_shot: bool,
        valid_from: TimestampLike,
        valid_until: TimestampLike,
        max_uses: Optional[int] = None,
    ) -> Coupon:
        """
        Create a coupon.

        Args:
            code: 4-20 alphanumeric characters
            coupon_type: "fixed" or "percent", case-insensitive
            value: Cents for fixed coupons, basis points for percent coupons
            one_shot: Stored flag
            valid_from: Start of the validity window
            valid_until: End of the validity window
            max_uses: Optional usage cap

        Returns:
            Created Coupon

        Raises:
            ValidationFailedError: If a field cannot be parsed or is out of range
            ConflictError: If the code is taken
        """
        self.logger.info(f"🆕 Creating coupon: {code}")

        data = NewCoupon(
            code=code,
            type=parse_coupon_type(coupon_type),
            value=value,
            one_shot=one_shot,
            valid_from=parse_timestamp("valid_from", valid_from),
            valid_until=parse_timestamp("valid_until", valid_until),
            max_uses=max_uses,
        )
        coupon = await self.coupon_repo.create(data)

        self.logger.info(f"✅ Coupon created: {coupon.code}")
        return coupon
