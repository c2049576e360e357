"""Use Case for partially updating a product."""

from typing import Optional

from domain.entities import ProductUpdate
from domain.exceptions import ValidationFailedError
from domain.repositories import IProductRepository
from domain.services import IdLike
from domain.value_objects import PatchOperation
from infrastructure.config import get_logger


class UpdateProductUseCase:
    """Apply supplied fields only and report them as patch operations."""

    def __init__(self, product_repository: IProductRepository):
        self.product_repo = product_repository
        self.logger = get_logger(self.__class__.__name__)

    async def execute(
        self,
        product_id: IdLike,
        name: Optional[str] = None,
        description: Optional[str] = None,
        stock: Optional[int] = None,
        price: Optional[int] = None,
    ) -> list[PatchOperation]:
        """
        Update a product.

        Returns:
            One replace operation per supplied field

        Raises:
            ValidationFailedError: If no field is supplied or one is out of range
            NotFoundError: If the product is absent or deleted
            ConflictError: If the new name is taken
        """
        partial = ProductUpdate(name=name, description=description, stock=stock, price=price)
        patches = partial.patch_operations()
        if not patches:
            raise ValidationFailedError("No fields to update")

        self.logger.info(f"✏️ Updating product {product_id}: {[p.path for p in patches]}")
        await self.product_repo.update(product_id, partial)

        return patches
