"""Use Case for applying a coupon to a product."""

from domain.entities import ProductView
from domain.repositories import IProductRepository, IDiscountRepository
from domain.services import IdLike
from infrastructure.config import get_logger


class ApplyCouponDiscountUseCase:
    """
    Attach a coupon to a product.

    Validity, the minimum final price, the one-active-discount rule and the
    usage increment are enforced atomically by the discount repository.
    This use case returns the product with its new final price.
    """

    def __init__(
        self,
        product_repository: IProductRepository,
        discount_repository: IDiscountRepository,
    ):
        self.product_repo = product_repository
        self.discount_repo = discount_repository
        self.logger = get_logger(self.__class__.__name__)

    async def execute(self, product_id: IdLike, coupon_code: str) -> ProductView:
        """
        Apply a coupon.

        Raises:
            NotFoundError: If the product or coupon is absent or deleted
            UnprocessableStateError: If the coupon is not usable now or the
                discounted price would drop below the minimum
            ConflictError: If the product already has an active discount
        """
        self.logger.info(
            "🏷️ Applying coupon",
            extra={"product_id": product_id, "coupon_code": coupon_code},
        )

        application = await self.discount_repo.apply_coupon(product_id, coupon_code)

        product = await self.product_repo.find(application.product_id)
        discount = await self.discount_repo.find_active_discount(product.id)

        return ProductView(product=product, discount=discount)
