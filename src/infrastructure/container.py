"""Repository wiring for the configured storage backend."""

from dataclasses import dataclass
from typing import Optional

from domain.repositories import IProductRepository, ICouponRepository, IDiscountRepository
from infrastructure.config import Settings, get_logger
from infrastructure.database import Database
from infrastructure.database.repositories import (
    SQLAlchemyProductRepository,
    SQLAlchemyCouponRepository,
    SQLAlchemyDiscountRepository,
)
from infrastructure.memory import (
    InMemoryStore,
    InMemoryProductRepository,
    InMemoryCouponRepository,
    InMemoryDiscountRepository,
)

logger = get_logger(__name__)


@dataclass
class Repositories:
    """The three repositories sharing one backing store."""

    products: IProductRepository
    coupons: ICouponRepository
    discounts: IDiscountRepository
    database: Optional[Database] = None

    async def close(self) -> None:
        if self.database is not None:
            await self.database.close_db()


def build_memory_repositories(store: Optional[InMemoryStore] = None) -> Repositories:
    store = store or InMemoryStore()
    return Repositories(
        products=InMemoryProductRepository(store),
        coupons=InMemoryCouponRepository(store),
        discounts=InMemoryDiscountRepository(store),
    )


async def build_sql_repositories(database: Database) -> Repositories:
    """Create the schema if needed and wire SQLAlchemy repositories."""
    await database.init_db()
    factory = database.session_factory
    return Repositories(
        products=SQLAlchemyProductRepository(factory),
        coupons=SQLAlchemyCouponRepository(factory),
        discounts=SQLAlchemyDiscountRepository(factory),
        database=database,
    )


async def build_repositories(settings: Settings) -> Repositories:
    """Build repositories for settings.storage_backend."""
    if settings.storage_backend == "memory":
        logger.info("🧠 Using in-memory storage")
        return build_memory_repositories()

    logger.info("🐘 Using SQL storage")
    database = Database(
        settings.sqlalchemy_url,
        echo=settings.database_echo,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    return await build_sql_repositories(database)
