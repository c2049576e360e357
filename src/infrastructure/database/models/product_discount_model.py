"""Product discount application SQLAlchemy model."""

from datetime import datetime
from uuid import UUID, uuid4
from sqlalchemy import Integer, DateTime, ForeignKey, Index, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from domain.services import utc_now
from infrastructure.database.session import Base


class ProductDiscountModel(Base):
    """
    SQLAlchemy model for discount applications.

    coupon_id is NULL for direct percentage discounts.
    """

    __tablename__ = "product_coupon_applications"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)

    product_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("products.id"),
        nullable=False,
        index=True,
    )
    coupon_id: Mapped[UUID | None] = mapped_column(
        Uuid,
        ForeignKey("coupons.id"),
        nullable=True,
    )
    percentage: Mapped[int | None] = mapped_column(Integer, nullable=True)

    applied_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )
    removed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    @classmethod
    def active(cls):
        """Predicate selecting applications that have not been removed."""
        return cls.removed_at.is_(None)


# At most one active application per product
Index(
    "idx_unique_active_coupon",
    ProductDiscountModel.product_id,
    unique=True,
    postgresql_where=ProductDiscountModel.removed_at.is_(None),
    sqlite_where=ProductDiscountModel.removed_at.is_(None),
)
