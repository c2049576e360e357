"""Domain Value Objects - Immutable objects without identity."""

from .pagination import PageRequest, PaginationMeta, Page, paginate
from .patch_operation import PatchOperation

__all__ = ["PageRequest", "PaginationMeta", "Page", "paginate", "PatchOperation"]
