"""Database engine, session factory and schema bootstrap."""

from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from infrastructure.config import get_logger

logger = get_logger(__name__)


class Base(DeclarativeBase):
    """Declarative base for all ORM models."""


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """
    Owns one async engine and its session factory.

    Built once at startup and passed to the repositories.
    """

    def __init__(
        self,
        url: str,
        echo: bool = False,
        pool_size: int = 5,
        max_overflow: int = 10,
    ):
        engine_args: dict[str, Any] = {"echo": echo}
        self.is_sqlite = url.startswith("sqlite")
        if not self.is_sqlite:
            engine_args.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_pre_ping=True,
            )

        self.engine: AsyncEngine = create_async_engine(url, **engine_args)

        if self.is_sqlite:
            event.listen(self.engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

        self.session_factory: async_sessionmaker[AsyncSession] = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            autoflush=False,
            expire_on_commit=False,
        )

    async def init_db(self) -> None:
        """Create every table and index that does not exist yet."""
        # Import models so they register on Base.metadata
        from infrastructure.database import models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("✅ Database schema ready")

    async def drop_all(self) -> None:
        from infrastructure.database import models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    async def close_db(self) -> None:
        await self.engine.dispose()

