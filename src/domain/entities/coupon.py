"""Coupon entity and its create/update payloads."""

import re
from dataclasses import dataclass, field, fields, replace
from datetime import datetime
from typing import Any, Optional
from uuid import UUID, uuid4

from domain.enums import CouponType
from domain.exceptions import ValidationFailedError
from domain.services import utc_now, as_utc, BASIS_POINTS
from domain.value_objects import PatchOperation

COUPON_CODE_PATTERN = re.compile(r"^[a-zA-Z0-9]{4,20}$")


def code_key(code: str) -> str:
    """Key used for case-insensitive code lookups and uniqueness."""
    return code.strip().lower()


def validate_code(code: str) -> str:
    code = code.strip()
    if not COUPON_CODE_PATTERN.match(code):
        raise ValidationFailedError("code must be 4 to 20 alphanumeric characters")
    return code


def validate_value(coupon_type: CouponType, value: int) -> None:
    """Fixed values are positive cents; percent values are 1..10000 basis points."""
    if value < 1:
        raise ValidationFailedError("value must be positive")
    if coupon_type == CouponType.PERCENT and value > BASIS_POINTS:
        raise ValidationFailedError(
            f"percent value must be at most {BASIS_POINTS} basis points"
        )


def validate_window(valid_from: datetime, valid_until: datetime) -> None:
    if valid_from > valid_until:
        raise ValidationFailedError("valid_from must not be after valid_until")


def _validate_max_uses(max_uses: Optional[int]) -> None:
    if max_uses is not None and max_uses < 1:
        raise ValidationFailedError("max_uses must be at least 1")


@dataclass(frozen=True)
class NewCoupon:
    """Validated input for creating a coupon."""

    code: str
    type: CouponType
    value: int
    one_shot: bool
    valid_from: datetime
    valid_until: datetime
    max_uses: Optional[int] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "code", validate_code(self.code))
        object.__setattr__(self, "valid_from", as_utc(self.valid_from))
        object.__setattr__(self, "valid_until", as_utc(self.valid_until))
        validate_value(self.type, self.value)
        validate_window(self.valid_from, self.valid_until)
        _validate_max_uses(self.max_uses)


@dataclass(frozen=True)
class CouponUpdate:
    """
    Partial coupon update.

    Cross-field rules (value range for the type, window order) are checked
    against the merged coupon in Coupon.merged, not here.
    """

    type: Optional[CouponType] = None
    value: Optional[int] = None
    one_shot: Optional[bool] = None
    valid_from: Optional[datetime] = None
    valid_until: Optional[datetime] = None
    max_uses: Optional[int] = None

    def __post_init__(self) -> None:
        if self.valid_from is not None:
            object.__setattr__(self, "valid_from", as_utc(self.valid_from))
        if self.valid_until is not None:
            object.__setattr__(self, "valid_until", as_utc(self.valid_until))
        _validate_max_uses(self.max_uses)

    def changes(self) -> dict[str, Any]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }

    def patch_operations(self) -> list[PatchOperation]:
        return [PatchOperation.replace(k, v) for k, v in self.changes().items()]


@dataclass
class Coupon:
    """
    Discount coupon identified by its code.

    one_shot is stored and reported but usage caps come from max_uses only.
    """

    code: str
    type: CouponType
    value: int
    valid_from: datetime
    valid_until: datetime
    one_shot: bool = False
    max_uses: Optional[int] = None
    uses_count: int = 0
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=utc_now)
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    @classmethod
    def create(cls, data: NewCoupon) -> "Coupon":
        return cls(
            code=data.code,
            type=data.type,
            value=data.value,
            one_shot=data.one_shot,
            valid_from=data.valid_from,
            valid_until=data.valid_until,
            max_uses=data.max_uses,
        )

    @property
    def code_key(self) -> str:
        return code_key(self.code)

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    @property
    def has_uses_left(self) -> bool:
        return self.max_uses is None or self.uses_count < self.max_uses

    def is_within_window(self, now: datetime) -> bool:
        return self.valid_from <= now <= self.valid_until

    def is_valid_at(self, now: datetime) -> bool:
        """Usable for a new application at the given instant."""
        return not self.is_deleted and self.is_within_window(now) and self.has_uses_left

    def merged(self, update: CouponUpdate) -> "Coupon":
        """Copy with the update applied; validates the merged value and window."""
        candidate = replace(self, **update.changes(), updated_at=utc_now())
        validate_value(candidate.type, candidate.value)
        validate_window(candidate.valid_from, candidate.valid_until)
        return candidate
