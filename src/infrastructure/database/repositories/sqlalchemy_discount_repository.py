"""SQLAlchemy implementation of discount repository."""

from typing import Iterable, Optional
from uuid import UUID
from sqlalchemy import select, and_, or_
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities import ProductDiscount, ActiveDiscount
from domain.enums import CouponType
from domain.exceptions import NotFoundError, ConflictError, UnprocessableStateError
from domain.repositories import IDiscountRepository
from domain.services import (
    IdLike,
    coerce_uuid,
    utc_now,
    ensure_min_price,
    percentage_to_basis_points,
)
from infrastructure.database.models import (
    ProductModel,
    CouponModel,
    ProductDiscountModel,
)

from .base import SQLAlchemyRepository, utc_or_none
from .sqlalchemy_coupon_repository import coupon_to_entity, COUPON_NOT_FOUND
from .sqlalchemy_product_repository import PRODUCT_NOT_FOUND

ACTIVE_DISCOUNT_EXISTS = "Product already has an active coupon"
COUPON_NOT_VALID = "Coupon is not valid"
NO_ACTIVE_COUPON = "No active coupon found for product"
NO_ACTIVE_DISCOUNT = "No active discount found for product"


class SQLAlchemyDiscountRepository(SQLAlchemyRepository, IDiscountRepository):
    """
    Concrete implementation of IDiscountRepository using SQLAlchemy.

    Apply runs in one transaction: the product and coupon rows are locked
    with SELECT ... FOR UPDATE, the coupon and the minimum final price are
    re-checked, the application is inserted and uses_count incremented
    before commit. The partial unique index idx_unique_active_coupon backs
    the one-active-discount rule.
    """

    conflict_message = ACTIVE_DISCOUNT_EXISTS

    async def apply_coupon(self, product_id: IdLike, coupon_code: str) -> ProductDiscount:
        pid = self._parse_product_id(product_id)
        async with self.transaction() as session:
            product = await self._lock_live_product(session, pid)

            coupon = (
                await session.execute(
                    select(CouponModel)
                    .where(CouponModel.with_code(coupon_code), CouponModel.live())
                    .with_for_update()
                )
            ).scalar_one_or_none()
            if coupon is None:
                raise NotFoundError(COUPON_NOT_FOUND)

            entity = coupon_to_entity(coupon)
            if not entity.is_valid_at(utc_now()):
                raise UnprocessableStateError(COUPON_NOT_VALID)
            ensure_min_price(product.price, entity.type, entity.value)

            await self._assert_no_active(session, pid)

            model = ProductDiscountModel(product_id=pid, coupon_id=coupon.id, applied_at=utc_now())
            session.add(model)
            coupon.uses_count = coupon.uses_count + 1
            await session.flush()

            self.logger.info(f"🏷️ Coupon {coupon.code} applied to product {pid}")
            return self._model_to_entity(model)

    async def apply_percentage(self, product_id: IdLike, percentage: int) -> ProductDiscount:
        pid = self._parse_product_id(product_id)
        async with self.transaction() as session:
            product = await self._lock_live_product(session, pid)
            ensure_min_price(product.price, CouponType.PERCENT, percentage_to_basis_points(percentage))
            await self._assert_no_active(session, pid)

            model = ProductDiscountModel(product_id=pid, percentage=percentage, applied_at=utc_now())
            session.add(model)
            await session.flush()

            self.logger.info(f"🏷️ {percentage}% discount applied to product {pid}")
            return self._model_to_entity(model)

    async def remove_coupon(self, product_id: IdLike, coupon_code: str) -> None:
        pid = coerce_uuid(product_id)
        if pid is None:
            raise NotFoundError(NO_ACTIVE_COUPON)

        async with self.transaction() as session:
            stmt = (
                select(ProductDiscountModel)
                .join(CouponModel, CouponModel.id == ProductDiscountModel.coupon_id)
                .where(
                    ProductDiscountModel.product_id == pid,
                    ProductDiscountModel.active(),
                    CouponModel.with_code(coupon_code),
                )
                .with_for_update()
            )
            model = (await session.execute(stmt)).scalar_one_or_none()
            if model is None:
                raise NotFoundError(NO_ACTIVE_COUPON)

            model.removed_at = utc_now()

    async def remove_active_discount(self, product_id: IdLike) -> None:
        pid = coerce_uuid(product_id)
        if pid is None:
            raise NotFoundError(NO_ACTIVE_DISCOUNT)

        async with self.transaction() as session:
            stmt = (
                select(ProductDiscountModel)
                .where(
                    ProductDiscountModel.product_id == pid,
                    ProductDiscountModel.active(),
                )
                .with_for_update()
            )
            model = (await session.execute(stmt)).scalar_one_or_none()
            if model is None:
                raise NotFoundError(NO_ACTIVE_DISCOUNT)

            model.removed_at = utc_now()

    async def find_active_discount(self, product_id: IdLike) -> Optional[ActiveDiscount]:
        pid = coerce_uuid(product_id)
        if pid is None:
            return None

        found = await self.find_active_discounts([pid])
        return found.get(pid)

    async def find_active_discounts(
        self, product_ids: Iterable[UUID]
    ) -> dict[UUID, ActiveDiscount]:
        ids = list(product_ids)
        if not ids:
            return {}

        now = utc_now()
        stmt = (
            select(ProductDiscountModel, CouponModel)
            .outerjoin(CouponModel, CouponModel.id == ProductDiscountModel.coupon_id)
            .where(
                ProductDiscountModel.product_id.in_(ids),
                ProductDiscountModel.active(),
                or_(
                    ProductDiscountModel.coupon_id.is_(None),
                    and_(
                        CouponModel.live(),
                        CouponModel.valid_from <= now,
                        CouponModel.valid_until >= now,
                    ),
                ),
            )
        )

        async with self.transaction() as session:
            rows = (await session.execute(stmt)).all()

        return {
            application.product_id: ActiveDiscount(
                application=self._model_to_entity(application),
                coupon=coupon_to_entity(coupon) if coupon is not None else None,
            )
            for application, coupon in rows
        }

    @staticmethod
    def _parse_product_id(product_id: IdLike) -> UUID:
        pid = coerce_uuid(product_id)
        if pid is None:
            raise NotFoundError(PRODUCT_NOT_FOUND)
        return pid

    @staticmethod
    async def _lock_live_product(session: AsyncSession, pid: UUID) -> ProductModel:
        product = await session.scalar(
            select(ProductModel)
            .where(ProductModel.id == pid, ProductModel.live())
            .with_for_update()
        )
        if product is None:
            raise NotFoundError(PRODUCT_NOT_FOUND)
        return product

    @staticmethod
    async def _assert_no_active(session: AsyncSession, pid: UUID) -> None:
        active = await session.scalar(
            select(ProductDiscountModel.id)
            .where(
                ProductDiscountModel.product_id == pid,
                ProductDiscountModel.active(),
            )
            .limit(1)
        )
        if active is not None:
            raise ConflictError(ACTIVE_DISCOUNT_EXISTS)

    @staticmethod
    def _model_to_entity(model: ProductDiscountModel) -> ProductDiscount:
        """Convert ORM model to domain entity."""
        return ProductDiscount(
            id=model.id,
            product_id=model.product_id,
            coupon_id=model.coupon_id,
            percentage=model.percentage,
            applied_at=utc_or_none(model.applied_at),
            removed_at=utc_or_none(model.removed_at),
        )
