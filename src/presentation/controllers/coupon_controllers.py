"""Controllers for coupon endpoints."""

from application.use_cases import (
    CreateCouponUseCase,
    GetCouponUseCase,
    GetAllCouponsUseCase,
    UpdateCouponUseCase,
    DeleteCouponUseCase,
)
from presentation.schemas import (
    CreateCouponRequest,
    UpdateCouponRequest,
    CouponListQuery,
    CouponResponse,
    CouponListResponse,
    PaginationMetaResponse,
    PatchOperationResponse,
)

from .base import GenericController, AdapterRequest, AdapterResponse, StatusCode

COUPON_REQUIRED_FIELDS = ("code", "type", "value", "one_shot", "valid_from", "valid_until")


class CreateCouponController(GenericController):

    def __init__(self, use_case: CreateCouponUseCase):
        super().__init__()
        self.use_case = use_case

    async def process(self, request: AdapterRequest) -> AdapterResponse:
        body = self.require_body(request)
        self.require_fields(body, COUPON_REQUIRED_FIELDS)
        payload = self.parse_body(CreateCouponRequest, body)

        coupon = await self.use_case.execute(
            code=payload.code,
            coupon_type=payload.type,
            value=payload.value,
            one_shot=payload.one_shot,
            valid_from=payload.valid_from,
            valid_until=payload.valid_until,
            max_uses=payload.max_uses,
        )
        return AdapterResponse(
            status=StatusCode.CREATED,
            data=CouponResponse.from_entity(coupon).model_dump(mode="json"),
        )


class GetCouponController(GenericController):

    def __init__(self, use_case: GetCouponUseCase):
        super().__init__()
        self.use_case = use_case

    async def process(self, request: AdapterRequest) -> AdapterResponse:
        coupon = await self.use_case.execute(self.path_param(request, "code"))
        return AdapterResponse(
            status=StatusCode.OK,
            data=CouponResponse.from_entity(coupon).model_dump(mode="json"),
        )


class GetCouponsController(GenericController):

    def __init__(self, use_case: GetAllCouponsUseCase):
        super().__init__()
        self.use_case = use_case

    async def process(self, request: AdapterRequest) -> AdapterResponse:
        query = self.parse_query(CouponListQuery, request.query)

        page = await self.use_case.execute(
            page=query.page,
            limit=query.limit,
            search=query.search,
            valid_from=query.valid_from,
            valid_until=query.valid_until,
            is_active=query.is_active,
        )
        listing = CouponListResponse(
            data=[CouponResponse.from_entity(c) for c in page.items],
            meta=PaginationMetaResponse.from_meta(page.meta),
        )
        return AdapterResponse(status=StatusCode.OK, data=listing.model_dump(mode="json"))


class UpdateCouponController(GenericController):

    def __init__(self, use_case: UpdateCouponUseCase):
        super().__init__()
        self.use_case = use_case

    async def process(self, request: AdapterRequest) -> AdapterResponse:
        code = self.path_param(request, "code")
        body = self.require_body(request)
        payload = self.parse_patch(UpdateCouponRequest, body)

        patches = await self.use_case.execute(
            code,
            coupon_type=payload.type,
            value=payload.value,
            one_shot=payload.one_shot,
            valid_from=payload.valid_from,
            valid_until=payload.valid_until,
            max_uses=payload.max_uses,
        )
        return AdapterResponse(
            status=StatusCode.OK,
            data=[PatchOperationResponse.from_operation(p).model_dump(mode="json") for p in patches],
        )


class DeleteCouponController(GenericController):

    def __init__(self, use_case: DeleteCouponUseCase):
        super().__init__()
        self.use_case = use_case

    async def process(self, request: AdapterRequest) -> AdapterResponse:
        await self.use_case.execute(self.path_param(request, "code"))
        return AdapterResponse(status=StatusCode.NO_CONTENT)
