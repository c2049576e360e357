"""SQLAlchemy implementation of product repository."""

from typing import Optional
from uuid import UUID
from sqlalchemy import select, func, or_
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities import Product, NewProduct, ProductUpdate, name_key
from domain.exceptions import NotFoundError, ConflictError
from domain.repositories import IProductRepository
from domain.services import IdLike, coerce_uuid, utc_now
from domain.value_objects import Page, PageRequest, PaginationMeta
from infrastructure.database.models import ProductModel, ProductDiscountModel

from .base import SQLAlchemyRepository, utc_or_none

PRODUCT_NOT_FOUND = "Product not found"
PRODUCT_EXISTS = "Product already exists"


def description_key(description: Optional[str]) -> Optional[str]:
    return description.lower() if description is not None else None


class SQLAlchemyProductRepository(SQLAlchemyRepository, IProductRepository):
    """Concrete implementation of IProductRepository using SQLAlchemy."""

    conflict_message = PRODUCT_EXISTS

    async def find(self, product_id: IdLike) -> Product:
        """Retrieve a live product by ID."""
        pid = self._parse_id(product_id)
        async with self.transaction() as session:
            model = await self._get_live(session, pid)
            return self._model_to_entity(model)

    async def find_all(
        self,
        page: PageRequest,
        search: Optional[str] = None,
        min_price: Optional[int] = None,
        max_price: Optional[int] = None,
        has_discount: Optional[bool] = None,
    ) -> Page[Product]:
        """List live products matching the filters, newest first."""
        filters = [ProductModel.live(), ProductModel.price >= (min_price or 0)]

        if search:
            needle = search.lower()
            filters.append(
                or_(
                    ProductModel.name_key.contains(needle, autoescape=True),
                    ProductModel.description_key.contains(needle, autoescape=True),
                )
            )

        if max_price is not None:
            filters.append(ProductModel.price <= max_price)

        if has_discount is not None:
            active_exists = (
                select(ProductDiscountModel.id)
                .where(
                    ProductDiscountModel.product_id == ProductModel.id,
                    ProductDiscountModel.active(),
                )
                .exists()
            )
            filters.append(active_exists if has_discount else ~active_exists)

        async with self.transaction() as session:
            total = await session.scalar(
                select(func.count()).select_from(
                    select(ProductModel.id).where(*filters).subquery()
                )
            )

            result = await session.execute(
                select(ProductModel)
                .where(*filters)
                .order_by(ProductModel.created_at.desc(), ProductModel.id.desc())
                .offset(page.offset)
                .limit(page.limit)
            )
            items = [self._model_to_entity(m) for m in result.scalars().all()]

        return Page(items=items, meta=PaginationMeta.build(page, total or 0))

    async def create(self, data: NewProduct) -> Product:
        """Create a new product in the database."""
        async with self.transaction() as session:
            await self._assert_name_free(session, data.name)

            model = self._entity_to_model(Product.create(data))
            session.add(model)
            await session.flush()
            return self._model_to_entity(model)

    async def update(self, product_id: IdLike, partial: ProductUpdate) -> Product:
        """Apply a partial update to a live product."""
        pid = self._parse_id(product_id)
        async with self.transaction() as session:
            model = await self._get_live(session, pid, for_update=True)
            updated = self._model_to_entity(model).merged(partial)

            if partial.name is not None:
                await self._assert_name_free(session, updated.name, exclude_id=pid)

            self._update_model_from_entity(model, updated)
            await session.flush()
            return updated

    async def delete(self, product_id: IdLike) -> None:
        """Soft-delete a product."""
        pid = self._parse_id(product_id)
        async with self.transaction() as session:
            model = await self._get_live(session, pid, for_update=True)
            model.deleted_at = utc_now()

    async def restore(self, product_id: IdLike) -> Product:
        """Bring a soft-deleted product back."""
        pid = self._parse_id(product_id)
        async with self.transaction() as session:
            stmt = (
                select(ProductModel)
                .where(ProductModel.id == pid, ProductModel.deleted_at.is_not(None))
                .with_for_update()
            )
            model = (await session.execute(stmt)).scalar_one_or_none()
            if model is None:
                raise NotFoundError(PRODUCT_NOT_FOUND)

            await self._assert_name_free(session, model.name, exclude_id=pid)

            model.deleted_at = None
            model.updated_at = utc_now()
            await session.flush()
            return self._model_to_entity(model)

    async def has_discount(self, product_id: IdLike) -> bool:
        """Check for an active discount application."""
        pid = coerce_uuid(product_id)
        if pid is None:
            return False

        async with self.transaction() as session:
            found = await session.scalar(
                select(ProductDiscountModel.id)
                .where(
                    ProductDiscountModel.product_id == pid,
                    ProductDiscountModel.active(),
                )
                .limit(1)
            )
            return found is not None

    @staticmethod
    def _parse_id(product_id: IdLike) -> UUID:
        pid = coerce_uuid(product_id)
        if pid is None:
            raise NotFoundError(PRODUCT_NOT_FOUND)
        return pid

    @staticmethod
    async def _get_live(
        session: AsyncSession, pid: UUID, for_update: bool = False
    ) -> ProductModel:
        stmt = select(ProductModel).where(ProductModel.id == pid, ProductModel.live())
        if for_update:
            stmt = stmt.with_for_update()

        model = (await session.execute(stmt)).scalar_one_or_none()
        if model is None:
            raise NotFoundError(PRODUCT_NOT_FOUND)
        return model

    @staticmethod
    async def _assert_name_free(
        session: AsyncSession, name: str, exclude_id: Optional[UUID] = None
    ) -> None:
        stmt = select(ProductModel.id).where(
            ProductModel.name_key == name_key(name),
            ProductModel.live(),
        )
        if exclude_id is not None:
            stmt = stmt.where(ProductModel.id != exclude_id)

        if await session.scalar(stmt.limit(1)) is not None:
            raise ConflictError(PRODUCT_EXISTS)

    def _entity_to_model(self, entity: Product) -> ProductModel:
        """Convert domain entity to ORM model."""
        return ProductModel(
            id=entity.id,
            name=entity.name,
            description=entity.description,
            stock=entity.stock,
            price=entity.price,
            name_key=entity.name_key,
            description_key=description_key(entity.description),
            created_at=entity.created_at,
            updated_at=entity.updated_at,
            deleted_at=entity.deleted_at,
        )

    def _update_model_from_entity(self, model: ProductModel, entity: Product) -> None:
        model.name = entity.name
        model.description = entity.description
        model.name_key = entity.name_key
        model.description_key = description_key(entity.description)
        model.stock = entity.stock
        model.price = entity.price
        model.updated_at = entity.updated_at

    def _model_to_entity(self, model: ProductModel) -> Product:
        """Convert ORM model to domain entity."""
        return Product(
            id=model.id,
            name=model.name,
            description=model.description,
            stock=model.stock,
            price=model.price,
            created_at=utc_or_none(model.created_at),
            updated_at=utc_or_none(model.updated_at),
            deleted_at=utc_or_none(model.deleted_at),
        )
