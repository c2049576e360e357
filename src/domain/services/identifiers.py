"""Identifier parsing."""

from typing import Optional, Union
from uuid import UUID

IdLike = Union[UUID, str]


def coerce_uuid(value: IdLike) -> Optional[UUID]:
    """Return the UUID for value, or None when it is malformed."""
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except (ValueError, AttributeError, TypeError):
        return None
