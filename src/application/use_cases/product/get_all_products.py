"""Use Case for listing products."""

from typing import Optional

from domain.entities import ProductView
from domain.exceptions import ValidationFailedError
from domain.repositories import IProductRepository, IDiscountRepository
from domain.value_objects import Page, PageRequest
from infrastructure.config import get_logger


class GetAllProductsUseCase:
    """Filtered, paginated product listing with effective prices."""

    def __init__(
        self,
        product_repository: IProductRepository,
        discount_repository: IDiscountRepository,
    ):
        self.product_repo = product_repository
        self.discount_repo = discount_repository
        self.logger = get_logger(self.__class__.__name__)

    async def execute(
        self,
        page: int = 1,
        limit: int = 10,
        search: Optional[str] = None,
        min_price: Optional[int] = None,
        max_price: Optional[int] = None,
        has_discount: Optional[bool] = None,
    ) -> Page[ProductView]:
        """
        List live products, newest first.

        Args:
            page: 1-indexed page number
            limit: Page size
            search: Substring of name or description
            min_price: Inclusive lower price bound
            max_price: Inclusive upper price bound
            has_discount: Restrict to products with (True) or without (False)
                an active discount

        Returns:
            Page of product views
        """
        request = PageRequest(page=page, limit=limit)
        if min_price is not None and max_price is not None and min_price > max_price:
            raise ValidationFailedError("min_price must not exceed max_price")

        self.logger.info(f"📄 Listing products page={page} limit={limit}")

        result = await self.product_repo.find_all(
            request,
            search=search,
            min_price=min_price,
            max_price=max_price,
            has_discount=has_discount,
        )
        discounts = await self.discount_repo.find_active_discounts(
            [p.id for p in result.items]
        )

        return Page(
            items=[ProductView(product=p, discount=discounts.get(p.id)) for p in result.items],
            meta=result.meta,
        )
