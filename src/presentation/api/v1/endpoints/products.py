"""Product and product discount endpoints."""

from fastapi import APIRouter, Depends, Request, Response

from presentation.schemas import (
    ErrorResponse,
    ProductResponse,
    ProductListResponse,
    PatchOperationResponse,
)
from presentation.api.v1.adapter import dispatch
from presentation.api.v1.dependencies import Controllers, get_controllers

router = APIRouter(prefix="/products", tags=["products"])

NOT_FOUND = {404: {"model": ErrorResponse}}
BAD_REQUEST = {400: {"model": ErrorResponse}}
CONFLICT = {409: {"model": ErrorResponse}}
UNPROCESSABLE = {422: {"model": ErrorResponse}}


@router.post(
    "",
    status_code=201,
    responses={201: {"model": ProductResponse}, **BAD_REQUEST, **CONFLICT},
)
async def create_product(
    request: Request,
    controllers: Controllers = Depends(get_controllers),
) -> Response:
    """
    Create a product.

    Body: {"name", "stock", "price", "description"?}. Names are unique
    among live products, ignoring case and surrounding whitespace.
    """
    return await dispatch(controllers.create_product, request)


@router.get("", responses={200: {"model": ProductListResponse}, **BAD_REQUEST})
async def list_products(
    request: Request,
    controllers: Controllers = Depends(get_controllers),
) -> Response:
    """
    List live products.

    Query: page, limit, search, min_price, max_price, has_discount.
    """
    return await dispatch(controllers.get_products, request)


@router.get("/{id}", responses={200: {"model": ProductResponse}, **NOT_FOUND})
async def get_product(
    request: Request,
    controllers: Controllers = Depends(get_controllers),
) -> Response:
    """Get one live product with its current discount."""
    return await dispatch(controllers.get_product, request)


@router.patch(
    "/{id}",
    responses={
        200: {"model": list[PatchOperationResponse]},
        **BAD_REQUEST,
        **NOT_FOUND,
        **CONFLICT,
    },
)
async def update_product(
    request: Request,
    controllers: Controllers = Depends(get_controllers),
) -> Response:
    """Partially update a product. Returns the applied replace operations."""
    return await dispatch(controllers.update_product, request)


@router.delete("/{id}", status_code=204, responses=NOT_FOUND)
async def delete_product(
    request: Request,
    controllers: Controllers = Depends(get_controllers),
) -> Response:
    """Soft-delete a product."""
    return await dispatch(controllers.delete_product, request)


@router.post(
    "/{id}/restore",
    responses={200: {"model": ProductResponse}, **NOT_FOUND, **CONFLICT},
)
async def restore_product(
    request: Request,
    controllers: Controllers = Depends(get_controllers),
) -> Response:
    """Bring a soft-deleted product back."""
    return await dispatch(controllers.restore_product, request)


@router.post(
    "/{id}/discount/coupon",
    responses={
        200: {"model": ProductResponse},
        **BAD_REQUEST,
        **NOT_FOUND,
        **CONFLICT,
        **UNPROCESSABLE,
    },
)
async def apply_coupon(
    request: Request,
    controllers: Controllers = Depends(get_controllers),
) -> Response:
    """
    Apply a coupon to a product.

    Body: {"code"}. A product holds at most one active discount.
    """
    return await dispatch(controllers.apply_coupon, request)


@router.post(
    "/{id}/discount/percent",
    responses={
        200: {"model": ProductResponse},
        **BAD_REQUEST,
        **NOT_FOUND,
        **CONFLICT,
        **UNPROCESSABLE,
    },
)
async def apply_percent_discount(
    request: Request,
    controllers: Controllers = Depends(get_controllers),
) -> Response:
    """Apply a direct percentage discount. Body: {"percentage"} in 1..80."""
    return await dispatch(controllers.apply_percent_discount, request)


@router.delete("/{id}/discount", status_code=204, responses={**BAD_REQUEST, **NOT_FOUND})
async def remove_discount(
    request: Request,
    controllers: Controllers = Depends(get_controllers),
) -> Response:
    """Remove the active discount, optionally only when it uses {"code"}."""
    return await dispatch(controllers.remove_discount, request)
