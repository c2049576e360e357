"""Use Case for partially updating a coupon."""

from typing import Optional, Union

from domain.entities import CouponUpdate
from domain.enums import CouponType
from domain.exceptions import ValidationFailedError
from domain.repositories import ICouponRepository
from domain.value_objects import PatchOperation
from infrastructure.config import get_logger

from .parsing import TimestampLike, parse_optional_timestamp, parse_coupon_type


class UpdateCouponUseCase:
    """
    Apply supplied coupon fields and report them as patch operations.

    The code itself is immutable. The merged coupon must still satisfy
    valid_from <= valid_until and the value range of its type.
    """

    def __init__(self, coupon_repository: ICouponRepository):
        self.coupon_repo = coupon_repository
        self.logger = get_logger(self.__class__.__name__)

    async def execute(
        self,
        code: str,
        coupon_type: Optional[Union[str, CouponType]] = None,
        value: Optional[int] = None,
        one_shot: Optional[bool] = None,
        valid_from: Optional[TimestampLike] = None,
        valid_until: Optional[TimestampLike] = None,
        max_uses: Optional[int] = None,
    ) -> list[PatchOperation]:
        partial = CouponUpdate(
            type=parse_coupon_type(coupon_type) if coupon_type is not None else None,
            value=value,
            one_shot=one_shot,
            valid_from=parse_optional_timestamp("valid_from", valid_from),
            valid_until=parse_optional_timestamp("valid_until", valid_until),
            max_uses=max_uses,
        )
        patches = partial.patch_operations()
        if not patches:
            raise ValidationFailedError("No fields to update")

        self.logger.info(f"✏️ Updating coupon {code}: {[p.path for p in patches]}")
        await self.coupon_repo.update(code, partial)

        return patches
