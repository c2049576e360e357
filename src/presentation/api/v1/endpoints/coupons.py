"""Coupon endpoints."""

from fastapi import APIRouter, Depends, Request, Response

from presentation.schemas import (
    ErrorResponse,
    CouponResponse,
    CouponListResponse,
    PatchOperationResponse,
)
from presentation.api.v1.adapter import dispatch
from presentation.api.v1.dependencies import Controllers, get_controllers

router = APIRouter(prefix="/coupons", tags=["coupons"])


@router.post(
    "",
    status_code=201,
    responses={
        201: {"model": CouponResponse},
        400: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
)
async def create_coupon(
    request: Request,
    controllers: Controllers = Depends(get_controllers),
) -> Response:
    """
    Create a coupon.

    Body: {"code", "type", "value", "one_shot", "valid_from", "valid_until",
    "max_uses"?}. Percent values are basis points (2000 = 20%).
    """
    return await dispatch(controllers.create_coupon, request)


@router.get("", responses={200: {"model": CouponListResponse}, 400: {"model": ErrorResponse}})
async def list_coupons(
    request: Request,
    controllers: Controllers = Depends(get_controllers),
) -> Response:
    """List live coupons. Query: page, limit, search, valid_from, valid_until, is_active."""
    return await dispatch(controllers.get_coupons, request)


@router.get("/{code}", responses={200: {"model": CouponResponse}, 404: {"model": ErrorResponse}})
async def get_coupon(
    request: Request,
    controllers: Controllers = Depends(get_controllers),
) -> Response:
    return await dispatch(controllers.get_coupon, request)


@router.patch(
    "/{code}",
    responses={
        200: {"model": list[PatchOperationResponse]},
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
async def update_coupon(
    request: Request,
    controllers: Controllers = Depends(get_controllers),
) -> Response:
    """Partially update a coupon. The code itself cannot change."""
    return await dispatch(controllers.update_coupon, request)


@router.delete("/{code}", status_code=204, responses={404: {"model": ErrorResponse}})
async def delete_coupon(
    request: Request,
    controllers: Controllers = Depends(get_controllers),
) -> Response:
    """Soft-delete a coupon and close its active applications."""
    return await dispatch(controllers.delete_coupon, request)
