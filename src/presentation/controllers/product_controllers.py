"""Controllers for product endpoints."""

from application.use_cases import (
    CreateProductUseCase,
    GetProductUseCase,
    GetAllProductsUseCase,
    UpdateProductUseCase,
    DeleteProductUseCase,
    RestoreProductUseCase,
)
from presentation.schemas import (
    CreateProductRequest,
    UpdateProductRequest,
    ProductListQuery,
    ProductResponse,
    ProductListResponse,
    PaginationMetaResponse,
    PatchOperationResponse,
)

from .base import GenericController, AdapterRequest, AdapterResponse, StatusCode

PRODUCT_REQUIRED_FIELDS = ("name", "stock", "price")


class CreateProductController(GenericController):

    def __init__(self, use_case: CreateProductUseCase):
        super().__init__()
        self.use_case = use_case

    async def process(self, request: AdapterRequest) -> AdapterResponse:
        body = self.require_body(request)
        self.require_fields(body, PRODUCT_REQUIRED_FIELDS)
        payload = self.parse_body(CreateProductRequest, body)

        view = await self.use_case.execute(
            name=payload.name,
            description=payload.description,
            stock=payload.stock,
            price=payload.price,
        )
        return AdapterResponse(
            status=StatusCode.CREATED,
            data=ProductResponse.from_view(view).model_dump(mode="json"),
        )


class GetProductController(GenericController):

    def __init__(self, use_case: GetProductUseCase):
        super().__init__()
        self.use_case = use_case

    async def process(self, request: AdapterRequest) -> AdapterResponse:
        product_id = self.path_param(request, "id")
        view = await self.use_case.execute(product_id)
        return AdapterResponse(
            status=StatusCode.OK,
            data=ProductResponse.from_view(view).model_dump(mode="json"),
        )


class GetProductsController(GenericController):

    def __init__(self, use_case: GetAllProductsUseCase):
        super().__init__()
        self.use_case = use_case

    async def process(self, request: AdapterRequest) -> AdapterResponse:
        query = self.parse_query(ProductListQuery, request.query)

        page = await self.use_case.execute(
            page=query.page,
            limit=query.limit,
            search=query.search,
            min_price=query.min_price,
            max_price=query.max_price,
            has_discount=query.has_discount,
        )
        listing = ProductListResponse(
            data=[ProductResponse.from_view(v) for v in page.items],
            meta=PaginationMetaResponse.from_meta(page.meta),
        )
        return AdapterResponse(status=StatusCode.OK, data=listing.model_dump(mode="json"))


class UpdateProductController(GenericController):

    def __init__(self, use_case: UpdateProductUseCase):
        super().__init__()
        self.use_case = use_case

    async def process(self, request: AdapterRequest) -> AdapterResponse:
        product_id = self.path_param(request, "id")
        body = self.require_body(request)
        payload = self.parse_patch(UpdateProductRequest, body)

        patches = await self.use_case.execute(
            product_id,
            name=payload.name,
            description=payload.description,
            stock=payload.stock,
            price=payload.price,
        )
        return AdapterResponse(
            status=StatusCode.OK,
            data=[PatchOperationResponse.from_operation(p).model_dump(mode="json") for p in patches],
        )


class DeleteProductController(GenericController):

    def __init__(self, use_case: DeleteProductUseCase):
        super().__init__()
        self.use_case = use_case

    async def process(self, request: AdapterRequest) -> AdapterResponse:
        await self.use_case.execute(self.path_param(request, "id"))
        return AdapterResponse(status=StatusCode.NO_CONTENT)


class RestoreProductController(GenericController):

    def __init__(self, use_case: RestoreProductUseCase):
        super().__init__()
        self.use_case = use_case

    async def process(self, request: AdapterRequest) -> AdapterResponse:
        view = await self.use_case.execute(self.path_param(request, "id"))
        return AdapterResponse(
            status=StatusCode.OK,
            data=ProductResponse.from_view(view).model_dump(mode="json"),
        )
