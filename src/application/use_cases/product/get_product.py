"""Use Case for reading one product with its effective price."""

from domain.entities import ProductView
from domain.repositories import IProductRepository, IDiscountRepository
from domain.services import IdLike
from infrastructure.config import get_logger


class GetProductUseCase:
    """Load a live product and decorate it with its active discount."""

    def __init__(
        self,
        product_repository: IProductRepository,
        discount_repository: IDiscountRepository,
    ):
        self.product_repo = product_repository
        self.discount_repo = discount_repository
        self.logger = get_logger(self.__class__.__name__)

    async def execute(self, product_id: IdLike) -> ProductView:
        self.logger.info(f"🔎 Fetching product: {product_id}")

        product = await self.product_repo.find(product_id)
        discount = await self.discount_repo.find_active_discount(product.id)

        return ProductView(product=product, discount=discount)
