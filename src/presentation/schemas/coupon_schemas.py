"""Coupon-related Pydantic schemas."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from domain.entities import Coupon

from .common_schemas import PaginationMetaResponse


class CreateCouponRequest(BaseModel):
    """
    Request schema for creating a coupon.

    Timestamps are RFC 3339 or "YYYY-MM-DD HH:MM:SS"; they are parsed by
    the use case so that format errors read the same on every entry point.
    """

    model_config = ConfigDict(
        strict=True,
        json_schema_extra={
            "examples": [
                {
                    "code": "SAVE20",
                    "type": "percent",
                    "value": 2000,
                    "one_shot": False,
                    "valid_from": "2025-01-01T00:00:00Z",
                    "valid_until": "2025-12-31T23:59:59Z",
                    "max_uses": 100
                }
            ]
        },
    )

    code: str = Field(..., description="4-20 alphanumeric characters")
    type: str = Field(..., description="fixed or percent")
    value: int = Field(..., description="Cents for fixed, basis points (1-10000) for percent")
    one_shot: bool = Field(..., description="Single-use marker")
    valid_from: str = Field(..., description="Start of validity window")
    valid_until: str = Field(..., description="End of validity window")
    max_uses: Optional[int] = Field(None, description="Usage cap")


class UpdateCouponRequest(BaseModel):
    """Request schema for a partial coupon update. The code cannot change."""

    model_config = ConfigDict(
        strict=True,
        json_schema_extra={"examples": [{"value": 1500, "max_uses": 50}]},
    )

    type: Optional[str] = None
    value: Optional[int] = None
    one_shot: Optional[bool] = None
    valid_from: Optional[str] = None
    valid_until: Optional[str] = None
    max_uses: Optional[int] = None


class CouponListQuery(BaseModel):
    """Query parameters of the coupon listing. Strings are coerced."""

    page: int = Field(1, ge=1)
    limit: int = Field(10, ge=1, le=100)
    search: Optional[str] = None
    valid_from: Optional[str] = None
    valid_until: Optional[str] = None
    is_active: Optional[bool] = None


class CouponResponse(BaseModel):
    """Coupon as returned by the API."""

    id: UUID
    code: str
    type: str
    value: int
    one_shot: bool
    valid_from: datetime
    valid_until: datetime
    uses_count: int
    max_uses: Optional[int] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, coupon: Coupon) -> "CouponResponse":
        return cls(
            id=coupon.id,
            code=coupon.code,
            type=coupon.type.value,
            value=coupon.value,
            one_shot=coupon.one_shot,
            valid_from=coupon.valid_from,
            valid_until=coupon.valid_until,
            uses_count=coupon.uses_count,
            max_uses=coupon.max_uses,
            created_at=coupon.created_at,
            updated_at=coupon.updated_at,
        )


class CouponListResponse(BaseModel):
    """Paginated coupon listing."""

    data: list[CouponResponse]
    meta: PaginationMetaResponse
