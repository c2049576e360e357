"""Use Case for soft-deleting a product."""

from domain.repositories import IProductRepository
from domain.services import IdLike
from infrastructure.config import get_logger


class DeleteProductUseCase:

    def __init__(self, product_repository: IProductRepository):
        self.product_repo = product_repository
        self.logger = get_logger(self.__class__.__name__)

    async def execute(self, product_id: IdLike) -> None:
        self.logger.info(f"🗑️ Deleting product: {product_id}")
        await self.product_repo.delete(product_id)
