"""FastAPI dependency injection setup."""

from dataclasses import dataclass

from fastapi import Request

from application.use_cases import (
    CreateProductUseCase,
    GetProductUseCase,
    GetAllProductsUseCase,
    UpdateProductUseCase,
    DeleteProductUseCase,
    RestoreProductUseCase,
    CreateCouponUseCase,
    GetCouponUseCase,
    GetAllCouponsUseCase,
    UpdateCouponUseCase,
    DeleteCouponUseCase,
    ApplyCouponDiscountUseCase,
    ApplyPercentDiscountUseCase,
    RemoveDiscountUseCase,
)
from infrastructure.container import Repositories
from presentation.controllers import (
    CreateProductController,
    GetProductController,
    GetProductsController,
    UpdateProductController,
    DeleteProductController,
    RestoreProductController,
    CreateCouponController,
    GetCouponController,
    GetCouponsController,
    UpdateCouponController,
    DeleteCouponController,
    ApplyCouponController,
    ApplyPercentDiscountController,
    RemoveDiscountController,
)


@dataclass
class Controllers:
    """Every controller, built once at startup over shared repositories."""

    create_product: CreateProductController
    get_product: GetProductController
    get_products: GetProductsController
    update_product: UpdateProductController
    delete_product: DeleteProductController
    restore_product: RestoreProductController
    create_coupon: CreateCouponController
    get_coupon: GetCouponController
    get_coupons: GetCouponsController
    update_coupon: UpdateCouponController
    delete_coupon: DeleteCouponController
    apply_coupon: ApplyCouponController
    apply_percent_discount: ApplyPercentDiscountController
    remove_discount: RemoveDiscountController


def build_controllers(repos: Repositories) -> Controllers:
    """Wire use cases and controllers over one set of repositories."""
    products, coupons, discounts = repos.products, repos.coupons, repos.discounts

    return Controllers(
        create_product=CreateProductController(CreateProductUseCase(products)),
        get_product=GetProductController(GetProductUseCase(products, discounts)),
        get_products=GetProductsController(GetAllProductsUseCase(products, discounts)),
        update_product=UpdateProductController(UpdateProductUseCase(products)),
        delete_product=DeleteProductController(DeleteProductUseCase(products)),
        restore_product=RestoreProductController(RestoreProductUseCase(products, discounts)),
        create_coupon=CreateCouponController(CreateCouponUseCase(coupons)),
        get_coupon=GetCouponController(GetCouponUseCase(coupons)),
        get_coupons=GetCouponsController(GetAllCouponsUseCase(coupons)),
        update_coupon=UpdateCouponController(UpdateCouponUseCase(coupons)),
        delete_coupon=DeleteCouponController(DeleteCouponUseCase(coupons)),
        apply_coupon=ApplyCouponController(
            ApplyCouponDiscountUseCase(products, discounts)
        ),
        apply_percent_discount=ApplyPercentDiscountController(
            ApplyPercentDiscountUseCase(products, discounts)
        ),
        remove_discount=RemoveDiscountController(RemoveDiscountUseCase(discounts)),
    )


def get_controllers(request: Request) -> Controllers:
    """Controllers stored on the application during startup."""
    return request.app.state.controllers
