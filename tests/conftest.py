"""Pytest configuration and shared fixtures."""

from datetime import timedelta

import pytest
from fastapi.testclient import TestClient

from domain.entities import NewProduct, NewCoupon
from domain.enums import CouponType
from domain.services import utc_now
from infrastructure.config import Settings
from infrastructure.container import build_memory_repositories, build_sql_repositories
from infrastructure.database import Database
from presentation.api.app import create_app


@pytest.fixture
def keyboard():
    """Fixture for a valid product payload."""
    return NewProduct(
        name="Mechanical Keyboard",
        description="Hot-swappable, 75% layout",
        stock=250,
        price=2590,
    )


@pytest.fixture
def coupon_factory():
    """Build NewCoupon payloads valid from yesterday until next month by default."""

    def build(
        code="SAVE20",
        coupon_type=CouponType.PERCENT,
        value=2000,
        starts_in=timedelta(days=-1),
        ends_in=timedelta(days=30),
        max_uses=None,
    ):
        now = utc_now()
        return NewCoupon(
            code=code,
            type=coupon_type,
            value=value,
            one_shot=False,
            valid_from=now + starts_in,
            valid_until=now + ends_in,
            max_uses=max_uses,
        )

    return build


@pytest.fixture
def memory_repos():
    """Fixture for repositories over a fresh in-memory store."""
    return build_memory_repositories()


@pytest.fixture
async def sqlite_repos(tmp_path):
    """Fixture for SQLAlchemy repositories over a throwaway SQLite file."""
    database = Database(f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}")
    repositories = await build_sql_repositories(database)
    yield repositories
    await repositories.close()


@pytest.fixture(params=["memory", "sqlite"])
async def repos(request, tmp_path):
    """Run a test against every storage backend."""
    if request.param == "memory":
        yield build_memory_repositories()
        return

    database = Database(f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}")
    repositories = await build_sql_repositories(database)
    yield repositories
    await repositories.close()


@pytest.fixture
def settings():
    """Fixture for settings that never touch a real database."""
    return Settings(storage_backend="memory", log_format="text", log_level="WARNING")


@pytest.fixture
def client(settings):
    """Fixture for an API client backed by in-memory storage."""
    app = create_app(settings, repositories=build_memory_repositories())
    with TestClient(app) as test_client:
        yield test_client
