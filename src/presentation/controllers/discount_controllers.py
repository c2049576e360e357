"""Controllers for product discount endpoints."""

from application.use_cases import (
    ApplyCouponDiscountUseCase,
    ApplyPercentDiscountUseCase,
    RemoveDiscountUseCase,
)
from presentation.schemas import (
    ApplyCouponRequest,
    ApplyPercentDiscountRequest,
    RemoveDiscountRequest,
    ProductResponse,
)

from .base import GenericController, AdapterRequest, AdapterResponse, StatusCode


class ApplyCouponController(GenericController):

    def __init__(self, use_case: ApplyCouponDiscountUseCase):
        super().__init__()
        self.use_case = use_case

    async def process(self, request: AdapterRequest) -> AdapterResponse:
        product_id = self.path_param(request, "id")
        body = self.require_body(request)
        self.require_fields(body, ("code",))
        payload = self.parse_body(ApplyCouponRequest, body)

        view = await self.use_case.execute(product_id, payload.code)
        return AdapterResponse(
            status=StatusCode.OK,
            data=ProductResponse.from_view(view).model_dump(mode="json"),
        )


class ApplyPercentDiscountController(GenericController):

    def __init__(self, use_case: ApplyPercentDiscountUseCase):
        super().__init__()
        self.use_case = use_case

    async def process(self, request: AdapterRequest) -> AdapterResponse:
        product_id = self.path_param(request, "id")
        body = self.require_body(request)
        self.require_fields(body, ("percentage",))
        payload = self.parse_body(ApplyPercentDiscountRequest, body)

        view = await self.use_case.execute(product_id, payload.percentage)
        return AdapterResponse(
            status=StatusCode.OK,
            data=ProductResponse.from_view(view).model_dump(mode="json"),
        )


class RemoveDiscountController(GenericController):
    """The body is optional; {"code": ...} restricts removal to that coupon."""

    def __init__(self, use_case: RemoveDiscountUseCase):
        super().__init__()
        self.use_case = use_case

    async def process(self, request: AdapterRequest) -> AdapterResponse:
        product_id = self.path_param(request, "id")

        code = None
        if request.body is not None:
            body = self.require_body(request)
            code = self.parse_body(RemoveDiscountRequest, body).code

        await self.use_case.execute(product_id, code)
        return AdapterResponse(status=StatusCode.NO_CONTENT)
