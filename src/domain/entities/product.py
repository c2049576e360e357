"""Product entity and its create/update payloads."""

from dataclasses import dataclass, field, fields, replace
from datetime import datetime
from typing import Any, Optional
from uuid import UUID, uuid4

from domain.exceptions import ValidationFailedError
from domain.services import utc_now, MIN_PRICE
from domain.value_objects import PatchOperation

NAME_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 300
STOCK_MAX = 999_999


def normalize_name(raw: str) -> str:
    """Trim and collapse internal whitespace runs to single spaces."""
    return " ".join(raw.split())


def name_key(name: str) -> str:
    """Key used for case-insensitive name uniqueness."""
    return normalize_name(name).lower()


def _validate_name(name: str) -> str:
    normalized = normalize_name(name)
    if not 1 <= len(normalized) <= NAME_MAX_LENGTH:
        raise ValidationFailedError(
            f"name must be between 1 and {NAME_MAX_LENGTH} characters"
        )
    return normalized


def _validate_description(description: Optional[str]) -> None:
    if description is not None and len(description) > DESCRIPTION_MAX_LENGTH:
        raise ValidationFailedError(
            f"description must be at most {DESCRIPTION_MAX_LENGTH} characters"
        )


def _validate_stock(stock: int) -> None:
    if not 0 <= stock <= STOCK_MAX:
        raise ValidationFailedError(f"stock must be between 0 and {STOCK_MAX}")


def _validate_price(price: int) -> None:
    if price < MIN_PRICE:
        raise ValidationFailedError(f"price must be at least {MIN_PRICE}")


@dataclass(frozen=True)
class NewProduct:
    """Validated input for creating a product. The name is normalised."""

    name: str
    stock: int
    price: int
    description: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", _validate_name(self.name))
        _validate_description(self.description)
        _validate_stock(self.stock)
        _validate_price(self.price)


@dataclass(frozen=True)
class ProductUpdate:
    """
    Partial product update.

    A field left as None is not modified (COALESCE semantics), so a
    description cannot be cleared through an update.
    """

    name: Optional[str] = None
    description: Optional[str] = None
    stock: Optional[int] = None
    price: Optional[int] = None

    def __post_init__(self) -> None:
        if self.name is not None:
            object.__setattr__(self, "name", _validate_name(self.name))
        _validate_description(self.description)
        if self.stock is not None:
            _validate_stock(self.stock)
        if self.price is not None:
            _validate_price(self.price)

    def changes(self) -> dict[str, Any]:
        """Supplied fields only, in declaration order."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }

    def patch_operations(self) -> list[PatchOperation]:
        return [PatchOperation.replace(k, v) for k, v in self.changes().items()]


@dataclass
class Product:
    """
    Catalogue product.

    Prices are integers in the smallest currency unit. A product with
    deleted_at set is soft-deleted and hidden from normal reads.
    """

    name: str
    stock: int
    price: int
    description: Optional[str] = None
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=utc_now)
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    @classmethod
    def create(cls, data: NewProduct) -> "Product":
        return cls(
            name=data.name,
            description=data.description,
            stock=data.stock,
            price=data.price,
        )

    @property
    def name_key(self) -> str:
        return name_key(self.name)

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    @property
    def is_out_of_stock(self) -> bool:
        return self.stock == 0

    def merged(self, update: ProductUpdate) -> "Product":
        """Copy of this product with the update applied and updated_at refreshed."""
        return replace(self, **update.changes(), updated_at=utc_now())
