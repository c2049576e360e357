"""Product SQLAlchemy model."""

from datetime import datetime
from uuid import UUID, uuid4
from sqlalchemy import String, Integer, DateTime, Index, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from domain.services import utc_now
from infrastructure.database.session import Base


class ProductModel(Base):
    """SQLAlchemy model for catalogue products."""

    __tablename__ = "products"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(String(300), nullable=True)
    stock: Mapped[int] = mapped_column(Integer, nullable=False)
    price: Mapped[int] = mapped_column(Integer, nullable=False)

    # Lowercased in Python; SQL lower() only folds ASCII on some collations
    name_key: Mapped[str] = mapped_column(String(100), nullable=False)
    description_key: Mapped[str | None] = mapped_column(String(300), nullable=True)

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


# Names are unique case-insensitively among live products
Index(
    "uq_products_live_name",
    ProductModel.name_key,
    unique=True,
    postgresql_where=ProductModel.deleted_at.is_(None),
    sqlite_where=ProductModel.deleted_at.is_(None),
)
