"""Product repository interface - Abstract definition."""

from abc import ABC, abstractmethod
from typing import Optional

from domain.entities import Product, NewProduct, ProductUpdate
from domain.services import IdLike
from domain.value_objects import Page, PageRequest


class IProductRepository(ABC):
    """
    Abstract repository interface for Product entity.

    Every read and write ignores soft-deleted products unless stated
    otherwise. A malformed id behaves like an unknown id.
    """

    @abstractmethod
    async def find(self, product_id: IdLike) -> Product:
        """
        Retrieve a live product by ID.

        Args:
            product_id: Product UUID

        Returns:
            Product

        Raises:
            NotFoundError: If absent or soft-deleted
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        page: PageRequest,
        search: Optional[str] = None,
        min_price: Optional[int] = None,
        max_price: Optional[int] = None,
        has_discount: Optional[bool] = None,
    ) -> Page[Product]:
        """
        List live products, newest first.

        Args:
            page: Requested page window
            search: Case-insensitive substring of name or description
            min_price: Inclusive lower price bound (defaults to 0)
            max_price: Inclusive upper price bound (unbounded when None)
            has_discount: When True, only products with an active discount

        Returns:
            Page of products with pagination metadata
        """
        pass

    @abstractmethod
    async def create(self, data: NewProduct) -> Product:
        """
        Create a new product.

        Args:
            data: Validated product payload

        Returns:
            Created Product

        Raises:
            ConflictError: If a live product has the same normalised name
        """
        pass

    @abstractmethod
    async def update(self, product_id: IdLike, partial: ProductUpdate) -> Product:
        """
        Apply a partial update and refresh updated_at.

        Args:
            product_id: Product UUID
            partial: Fields to change

        Returns:
            Updated Product

        Raises:
            NotFoundError: If absent or soft-deleted
            ConflictError: If the new name clashes with another live product
        """
        pass

    @abstractmethod
    async def delete(self, product_id: IdLike) -> None:
        """
        Soft-delete a product.

        Raises:
            NotFoundError: If absent or already deleted
        """
        pass

    @abstractmethod
    async def restore(self, product_id: IdLike) -> Product:
        """
        Clear deleted_at on a soft-deleted product.

        Raises:
            NotFoundError: If no soft-deleted product has this ID
            ConflictError: If a live product now uses the same name
        """
        pass

    @abstractmethod
    async def has_discount(self, product_id: IdLike) -> bool:
        """
        Check whether the product has an active discount application.

        Returns:
            True if an application with removed_at unset exists
        """
        pass
