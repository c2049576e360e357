"""Shared transaction handling for SQLAlchemy repositories."""

from contextlib import asynccontextmanager
from datetime import datetime
from typing import AsyncIterator, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from domain.exceptions import ConflictError, StorageError
from domain.services import as_utc
from infrastructure.config import get_logger


class SQLAlchemyRepository:
    """
    Base class opening one session and transaction per repository call.

    Constraint violations become ConflictError with the repository's
    conflict message; any other driver failure becomes StorageError.
    """

    conflict_message = "Resource already exists"

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        """Initialize repository with a session factory."""
        self.session_factory = session_factory
        self.logger = get_logger(self.__class__.__name__)

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[AsyncSession]:
        """Session inside a transaction committed on exit, rolled back on error."""
        try:
            async with self.session_factory() as session:
                async with session.begin():
                    yield session
        except IntegrityError as e:
            self.logger.warning(f"Constraint violation: {e.orig}")
            raise ConflictError(self.conflict_message) from e
        except SQLAlchemyError as e:
            self.logger.error(f"❌ Storage failure: {e}", exc_info=True)
            raise StorageError("Storage failure") from e


def utc_or_none(value: Optional[datetime]) -> Optional[datetime]:
    """SQLite returns naive datetimes; every value stored is UTC."""
    return as_utc(value) if value is not None else None
