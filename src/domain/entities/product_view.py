"""Read model combining a product with its current discount."""

from dataclasses import dataclass
from typing import Optional

from .product import Product
from .product_discount import ActiveDiscount


@dataclass(frozen=True)
class ProductView:
    """Product as presented to callers; final_price is derived on every read."""

    product: Product
    discount: Optional[ActiveDiscount] = None

    @property
    def final_price(self) -> int:
        if self.discount is None:
            return self.product.price
        return self.discount.final_price(self.product.price)

    @property
    def has_coupon_applied(self) -> bool:
        return self.discount is not None

    @property
    def is_out_of_stock(self) -> bool:
        return self.product.is_out_of_stock
