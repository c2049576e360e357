"""Pagination value objects."""

import math
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from domain.exceptions import ValidationFailedError

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100


@dataclass(frozen=True)
class PageRequest:
    """
    1-indexed page window requested by a caller.

    Attributes:
        page: Page number, starting at 1
        limit: Maximum items per page
    """

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    def __post_init__(self) -> None:
        """Validate page bounds."""
        if self.page < 1:
            raise ValidationFailedError("page must be at least 1")
        if self.limit < 1 or self.limit > MAX_LIMIT:
            raise ValidationFailedError(f"limit must be between 1 and {MAX_LIMIT}")

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass(frozen=True)
class PaginationMeta:
    """Metadata describing one page of a listing."""

    page: int
    limit: int
    total_items: int
    total_pages: int

    @classmethod
    def build(cls, request: PageRequest, total_items: int) -> "PaginationMeta":
        """Compute total pages for a request and total item count."""
        return cls(
            page=request.page,
            limit=request.limit,
            total_items=total_items,
            total_pages=math.ceil(total_items / request.limit),
        )


@dataclass(frozen=True)
class Page(Generic[T]):
    """A slice of items together with its pagination metadata."""

    items: list[T] = field(default_factory=list)
    meta: PaginationMeta = field(
        default_factory=lambda: PaginationMeta(DEFAULT_PAGE, DEFAULT_LIMIT, 0, 0)
    )


def paginate(items: list[T], request: PageRequest) -> Page[T]:
    """Slice an already filtered and ordered list into a page."""
    window = items[request.offset:request.offset + request.limit]
    return Page(items=window, meta=PaginationMeta.build(request, len(items)))
