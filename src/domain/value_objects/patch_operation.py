"""Change-log entry produced by partial updates."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class PatchOperation:
    """
    One modified field, JSON-Patch style.

    Attributes:
        path: Field path, e.g. "/stock"
        value: New value of the field
        op: Always "replace" for partial updates
    """

    path: str
    value: Any
    op: str = "replace"

    @classmethod
    def replace(cls, field_name: str, value: Any) -> "PatchOperation":
        return cls(path=f"/{field_name}", value=value)

    def to_dict(self) -> dict[str, Any]:
        return {"op": self.op, "path": self.path, "value": self.value}
