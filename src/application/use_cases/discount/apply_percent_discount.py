"""Use Case for applying a direct percentage discount."""

from domain.entities import ProductView, validate_percentage
from domain.repositories import IProductRepository, IDiscountRepository
from domain.services import IdLike
from infrastructure.config import get_logger


class ApplyPercentDiscountUseCase:
    """Attach a whole-percent discount (1-80) without a coupon."""

    def __init__(
        self,
        product_repository: IProductRepository,
        discount_repository: IDiscountRepository,
    ):
        self.product_repo = product_repository
        self.discount_repo = discount_repository
        self.logger = get_logger(self.__class__.__name__)

    async def execute(self, product_id: IdLike, percentage: int) -> ProductView:
        validate_percentage(percentage)
        self.logger.info(f"🏷️ Applying {percentage}% discount", extra={"product_id": product_id})

        application = await self.discount_repo.apply_percentage(product_id, percentage)

        product = await self.product_repo.find(application.product_id)
        discount = await self.discount_repo.find_active_discount(product.id)

        return ProductView(product=product, discount=discount)
