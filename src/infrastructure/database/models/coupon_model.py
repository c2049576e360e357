"""Coupon SQLAlchemy model."""

from datetime import datetime
from uuid import UUID, uuid4
from sqlalchemy import (
    String,
    Integer,
    Boolean,
    DateTime,
    Enum,
    Index,
    Uuid,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column

from domain.enums import CouponType
from domain.services import utc_now
from infrastructure.database.session import Base


class CouponModel(Base):
    """SQLAlchemy model for coupons."""

    __tablename__ = "coupons"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)

    code: Mapped[str] = mapped_column(String(20), nullable=False)
    type: Mapped[CouponType] = mapped_column(
        Enum(
            CouponType,
            name="coupon_discount_type",
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
    )
    value: Mapped[int] = mapped_column(Integer, nullable=False)
    one_shot: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    # Validity
    valid_from: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    valid_until: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    uses_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    max_uses: Mapped[int | None] = mapped_column(Integer, nullable=True)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
        index=True,
    )
    updated_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    @classmethod
    def live(cls):
        """Predicate excluding soft-deleted rows."""
        return cls.deleted_at.is_(None)

    @classmethod
    def with_code(cls, code: str):
        """Case-insensitive code match."""
        return func.lower(cls.code) == code.strip().lower()


Index(
    "uq_coupons_live_code",
    func.lower(CouponModel.code),
    unique=True,
    postgresql_where=CouponModel.deleted_at.is_(None),
    sqlite_where=CouponModel.deleted_at.is_(None),
)
