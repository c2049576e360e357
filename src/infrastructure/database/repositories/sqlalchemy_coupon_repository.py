"""SQLAlchemy implementation of coupon repository."""

from datetime import datetime
from typing import Optional
from sqlalchemy import select, update, func, and_, not_
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities import Coupon, NewCoupon, CouponUpdate
from domain.exceptions import NotFoundError, ConflictError
from domain.repositories import ICouponRepository
from domain.services import IdLike, coerce_uuid, utc_now, as_utc
from domain.value_objects import Page, PageRequest, PaginationMeta
from infrastructure.database.models import CouponModel, ProductDiscountModel

from .base import SQLAlchemyRepository, utc_or_none

COUPON_NOT_FOUND = "Coupon not found"
COUPON_EXISTS = "Coupon already exists"


class SQLAlchemyCouponRepository(SQLAlchemyRepository, ICouponRepository):
    """Concrete implementation of ICouponRepository using SQLAlchemy."""

    conflict_message = COUPON_EXISTS

    async def create(self, data: NewCoupon) -> Coupon:
        """Create a new coupon in the database."""
        async with self.transaction() as session:
            exists = await session.scalar(
                select(CouponModel.id)
                .where(CouponModel.with_code(data.code), CouponModel.live())
                .limit(1)
            )
            if exists is not None:
                raise ConflictError(COUPON_EXISTS)

            model = self._entity_to_model(Coupon.create(data))
            session.add(model)
            await session.flush()
            return coupon_to_entity(model)

    async def find(self, code: str) -> Coupon:
        async with self.transaction() as session:
            model = await self._get_live(session, code)
            return coupon_to_entity(model)

    async def find_all(
        self,
        page: PageRequest,
        search: Optional[str] = None,
        valid_from: Optional[datetime] = None,
        valid_until: Optional[datetime] = None,
        is_active: Optional[bool] = None,
    ) -> Page[Coupon]:
        """List live coupons matching the filters, newest first."""
        filters = [CouponModel.live()]

        if search:
            filters.append(CouponModel.code.icontains(search, autoescape=True))
        if valid_from is not None:
            filters.append(CouponModel.valid_from >= as_utc(valid_from))
        if valid_until is not None:
            filters.append(CouponModel.valid_until <= as_utc(valid_until))
        if is_active is not None:
            now = utc_now()
            in_window = and_(CouponModel.valid_from <= now, CouponModel.valid_until >= now)
            filters.append(in_window if is_active else not_(in_window))

        async with self.transaction() as session:
            total = await session.scalar(
                select(func.count()).select_from(
                    select(CouponModel.id).where(*filters).subquery()
                )
            )

            result = await session.execute(
                select(CouponModel)
                .where(*filters)
                .order_by(CouponModel.created_at.desc(), CouponModel.id.desc())
                .offset(page.offset)
                .limit(page.limit)
            )
            items = [coupon_to_entity(m) for m in result.scalars().all()]

        return Page(items=items, meta=PaginationMeta.build(page, total or 0))

    async def update(self, code: str, partial: CouponUpdate) -> Coupon:
        """Apply a partial update; the merged coupon is re-validated."""
        async with self.transaction() as session:
            model = await self._get_live(session, code, for_update=True)
            updated = coupon_to_entity(model).merged(partial)

            model.type = updated.type
            model.value = updated.value
            model.one_shot = updated.one_shot
            model.valid_from = updated.valid_from
            model.valid_until = updated.valid_until
            model.max_uses = updated.max_uses
            model.updated_at = updated.updated_at
            await session.flush()
            return updated

    async def delete(self, code: str) -> None:
        """Soft-delete a coupon and close its active applications."""
        async with self.transaction() as session:
            model = await self._get_live(session, code, for_update=True)
            now = utc_now()
            model.deleted_at = now

            await session.execute(
                update(ProductDiscountModel)
                .where(
                    ProductDiscountModel.coupon_id == model.id,
                    ProductDiscountModel.active(),
                )
                .values(removed_at=now)
            )

    async def find_valid_coupon_by_code(self, code: str) -> Coupon:
        """Retrieve the coupon only if Coupon.is_valid_at holds right now."""
        async with self.transaction() as session:
            coupon = coupon_to_entity(await self._get_live(session, code))

        if not coupon.is_valid_at(utc_now()):
            raise NotFoundError(COUPON_NOT_FOUND)
        return coupon

    async def increment_uses(self, coupon_id: IdLike) -> None:
        cid = coerce_uuid(coupon_id)
        if cid is None:
            self.logger.warning(f"⚠️ Ignoring usage increment for malformed id: {coupon_id}")
            return

        async with self.transaction() as session:
            await session.execute(
                update(CouponModel)
                .where(CouponModel.id == cid)
                .values(uses_count=CouponModel.uses_count + 1)
            )

    @staticmethod
    async def _get_live(
        session: AsyncSession, code: str, for_update: bool = False
    ) -> CouponModel:
        stmt = select(CouponModel).where(CouponModel.with_code(code), CouponModel.live())
        if for_update:
            stmt = stmt.with_for_update()

        model = (await session.execute(stmt)).scalar_one_or_none()
        if model is None:
            raise NotFoundError(COUPON_NOT_FOUND)
        return model

    def _entity_to_model(self, entity: Coupon) -> CouponModel:
        """Convert domain entity to ORM model."""
        return CouponModel(
            id=entity.id,
            code=entity.code,
            type=entity.type,
            value=entity.value,
            one_shot=entity.one_shot,
            valid_from=entity.valid_from,
            valid_until=entity.valid_until,
            uses_count=entity.uses_count,
            max_uses=entity.max_uses,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
            deleted_at=entity.deleted_at,
        )


def coupon_to_entity(model: CouponModel) -> Coupon:
    """Convert ORM model to domain entity."""
    return Coupon(
        id=model.id,
        code=model.code,
        type=model.type,
        value=model.value,
        one_shot=model.one_shot,
        valid_from=utc_or_none(model.valid_from),
        valid_until=utc_or_none(model.valid_until),
        uses_count=model.uses_count,
        max_uses=model.max_uses,
        created_at=utc_or_none(model.created_at),
        updated_at=utc_or_none(model.updated_at),
        deleted_at=utc_or_none(model.deleted_at),
    )
