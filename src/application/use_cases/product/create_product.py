"""Use Case for creating a product."""

from typing import Optional

from domain.entities import NewProduct, ProductView
from domain.repositories import IProductRepository
from infrastructure.config import get_logger


class CreateProductUseCase:
    """Validate and store a new product."""

    def __init__(self, product_repository: IProductRepository):
        self.product_repo = product_repository
        self.logger = get_logger(self.__class__.__name__)

    async def execute(
        self,
        name: str,
        stock: int,
        price: int,
        description: Optional[str] = None,
    ) -> ProductView:
        """
        Create a product.

        Returns:
            The stored product; a new product never carries a discount

        Raises:
            ValidationFailedError: If a field is out of range
            ConflictError: If the normalised name is taken
        """
        self.logger.info(f"🆕 Creating product: {name}")

        data = NewProduct(name=name, description=description, stock=stock, price=price)
        product = await self.product_repo.create(data)

        self.logger.info(f"✅ Product created: {product.id}")
        return ProductView(product=product)
