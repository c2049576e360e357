"""Parsing of coupon fields that arrive as strings."""

from datetime import datetime
from typing import Optional, Union

from domain.enums import CouponType
from domain.exceptions import ValidationFailedError
from domain.services import as_utc

TIMESTAMP_FORMATS = ("%Y-%m-%d %H:%M:%S", "%Y-%m-%dT%H:%M:%S")

TimestampLike = Union[str, datetime]


def parse_timestamp(field_name: str, raw: TimestampLike) -> datetime:
    """
    Parse an RFC 3339 timestamp or one of TIMESTAMP_FORMATS.

    Values without an offset are taken as UTC. The result is aware UTC.
    """
    if isinstance(raw, datetime):
        return as_utc(raw)

    text = raw.strip()
    if text.endswith(("Z", "z")):
        text = f"{text[:-1]}+00:00"

    try:
        return as_utc(datetime.fromisoformat(text))
    except ValueError:
        pass

    for fmt in TIMESTAMP_FORMATS:
        try:
            return as_utc(datetime.strptime(text, fmt))
        except ValueError:
            continue

    raise ValidationFailedError(f"Invalid {field_name}: {raw}")


def parse_optional_timestamp(
    field_name: str, raw: Optional[TimestampLike]
) -> Optional[datetime]:
    return parse_timestamp(field_name, raw) if raw is not None else None


def parse_coupon_type(raw: Union[str, CouponType]) -> CouponType:
    if isinstance(raw, CouponType):
        return raw
    try:
        return CouponType.parse(raw)
    except ValueError as e:
        raise ValidationFailedError(str(e)) from e
