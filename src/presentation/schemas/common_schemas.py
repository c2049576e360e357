"""Shared Pydantic schemas."""

from typing import Any

from pydantic import BaseModel, Field

from domain.value_objects import PaginationMeta, PatchOperation


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="API version")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "status": "healthy",
                    "version": "1.0.0"
                }
            ]
        }
    }


class ErrorResponse(BaseModel):
    """Body of every failed request."""

    error: str = Field(..., description="Human readable error message")

    model_config = {
        "json_schema_extra": {
            "examples": [{"error": "Product not found"}]
        }
    }


class PaginationMetaResponse(BaseModel):
    """Pagination metadata of a listing."""

    page: int = Field(..., description="Current 1-indexed page")
    limit: int = Field(..., description="Page size")
    total_items: int = Field(..., description="Items matching the filters")
    total_pages: int = Field(..., description="ceil(total_items / limit)")

    @classmethod
    def from_meta(cls, meta: PaginationMeta) -> "PaginationMetaResponse":
        return cls(
            page=meta.page,
            limit=meta.limit,
            total_items=meta.total_items,
            total_pages=meta.total_pages,
        )


class PatchOperationResponse(BaseModel):
    """One field changed by a partial update."""

    op: str = Field("replace", description="Always 'replace'")
    path: str = Field(..., description="Changed field, e.g. /stock")
    value: Any = Field(..., description="New value")

    @classmethod
    def from_operation(cls, operation: PatchOperation) -> "PatchOperationResponse":
        return cls(**operation.to_dict())
