"""In-memory implementation of product repository."""

from dataclasses import replace
from typing import Optional
from uuid import UUID

from domain.entities import Product, NewProduct, ProductUpdate
from domain.exceptions import NotFoundError, ConflictError
from domain.repositories import IProductRepository
from domain.services import IdLike, coerce_uuid, utc_now
from domain.value_objects import Page, PageRequest, paginate

from .store import InMemoryStore

PRODUCT_NOT_FOUND = "Product not found"
PRODUCT_EXISTS = "Product already exists"


class InMemoryProductRepository(IProductRepository):
    """IProductRepository backed by an InMemoryStore."""

    def __init__(self, store: InMemoryStore):
        self.store = store

    async def find(self, product_id: IdLike) -> Product:
        async with self.store.lock:
            return replace(self._get_live(product_id))

    async def find_all(
        self,
        page: PageRequest,
        search: Optional[str] = None,
        min_price: Optional[int] = None,
        max_price: Optional[int] = None,
        has_discount: Optional[bool] = None,
    ) -> Page[Product]:
        async with self.store.lock:
            matches = [
                replace(p)
                for p in self.store.live_products()
                if self._matches(p, search, min_price, max_price, has_discount)
            ]

        matches.sort(key=lambda p: (p.created_at, p.id), reverse=True)
        return paginate(matches, page)

    async def create(self, data: NewProduct) -> Product:
        async with self.store.lock:
            if self.store.live_product_named(data.name) is not None:
                raise ConflictError(PRODUCT_EXISTS)

            product = Product.create(data)
            self.store.products[product.id] = product
            return replace(product)

    async def update(self, product_id: IdLike, partial: ProductUpdate) -> Product:
        async with self.store.lock:
            current = self._get_live(product_id)
            updated = current.merged(partial)

            if partial.name is not None:
                self._assert_name_free(updated.name, exclude_id=current.id)

            self.store.products[current.id] = updated
            return replace(updated)

    async def delete(self, product_id: IdLike) -> None:
        async with self.store.lock:
            product = self._get_live(product_id)
            product.deleted_at = utc_now()

    async def restore(self, product_id: IdLike) -> Product:
        async with self.store.lock:
            product = self.store.products.get(coerce_uuid(product_id))
            if product is None or not product.is_deleted:
                raise NotFoundError(PRODUCT_NOT_FOUND)

            self._assert_name_free(product.name, exclude_id=product.id)

            product.deleted_at = None
            product.updated_at = utc_now()
            return replace(product)

    async def has_discount(self, product_id: IdLike) -> bool:
        pid = coerce_uuid(product_id)
        if pid is None:
            return False

        async with self.store.lock:
            return self.store.active_discount(pid) is not None

    def _get_live(self, product_id: IdLike) -> Product:
        product = self.store.live_product(coerce_uuid(product_id))
        if product is None:
            raise NotFoundError(PRODUCT_NOT_FOUND)
        return product

    def _assert_name_free(self, name: str, exclude_id: UUID) -> None:
        other = self.store.live_product_named(name)
        if other is not None and other.id != exclude_id:
            raise ConflictError(PRODUCT_EXISTS)

    def _matches(
        self,
        product: Product,
        search: Optional[str],
        min_price: Optional[int],
        max_price: Optional[int],
        has_discount: Optional[bool],
    ) -> bool:
        if search:
            needle = search.lower()
            haystacks = (product.name.lower(), (product.description or "").lower())
            if not any(needle in h for h in haystacks):
                return False

        if product.price < (min_price or 0):
            return False
        if max_price is not None and product.price > max_price:
            return False

        if has_discount is not None:
            active = self.store.active_discount(product.id) is not None
            if active != has_discount:
                return False

        return True
