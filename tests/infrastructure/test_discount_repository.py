"""Discount repository behaviour, mostly shared by every storage backend."""

from datetime import timedelta

import pytest
from sqlalchemy.exc import IntegrityError

from domain.entities import NewProduct, ProductUpdate
from domain.enums import CouponType
from domain.exceptions import ConflictError, NotFoundError, UnprocessableStateError
from infrastructure.database.models import ProductDiscountModel
from infrastructure.database.repositories import SQLAlchemyDiscountRepository


@pytest.fixture
async def product(repos, keyboard):
    return await repos.products.create(keyboard)


class TestApplyCoupon:
    """Test coupon applications."""

    async def test_apply_records_application_and_counts_use(
        self, repos, product, coupon_factory
    ):
        """Test that applying a coupon links it and increments uses_count."""
        coupon = await repos.coupons.create(coupon_factory())
        application = await repos.discounts.apply_coupon(product.id, "save20")

        assert application.product_id == product.id
        assert application.coupon_id == coupon.id
        assert application.is_active is True
        assert (await repos.coupons.find("SAVE20")).uses_count == 1

        discount = await repos.discounts.find_active_discount(product.id)
        assert discount.code == "SAVE20"
        assert discount.final_price(product.price) == 2072

    async def test_double_apply_raises_conflict(self, repos, product, coupon_factory):
        """Test that a second apply fails and leaves one active application."""
        await repos.coupons.create(coupon_factory())
        await repos.coupons.create(coupon_factory(code="OTHER123"))
        await repos.discounts.apply_coupon(product.id, "SAVE20")

        with pytest.raises(ConflictError, match="Product already has an active coupon"):
            await repos.discounts.apply_coupon(product.id, "OTHER123")

        assert (await repos.discounts.find_active_discount(product.id)).code == "SAVE20"
        assert (await repos.coupons.find("OTHER123")).uses_count == 0

    @pytest.mark.parametrize(
        "starts_in,ends_in",
        [
            (timedelta(days=-10), timedelta(days=-1)),
            (timedelta(days=1), timedelta(days=10)),
        ],
        ids=["expired", "not-yet-valid"],
    )
    async def test_coupon_outside_window_is_unprocessable(
        self, repos, product, coupon_factory, starts_in, ends_in
    ):
        """Test that coupons outside their window cannot be applied."""
        await repos.coupons.create(coupon_factory(starts_in=starts_in, ends_in=ends_in))

        with pytest.raises(UnprocessableStateError, match="Coupon is not valid"):
            await repos.discounts.apply_coupon(product.id, "SAVE20")

        assert (await repos.coupons.find("SAVE20")).uses_count == 0
        assert await repos.products.has_discount(product.id) is False

    async def test_exhausted_coupon_is_unprocessable(self, repos, product, coupon_factory):
        """Test that a coupon at max_uses cannot be applied again."""
        other = await repos.products.create(NewProduct(name="Mouse", stock=5, price=900))
        await repos.coupons.create(coupon_factory(max_uses=1))
        await repos.discounts.apply_coupon(product.id, "SAVE20")

        with pytest.raises(UnprocessableStateError):
            await repos.discounts.apply_coupon(other.id, "SAVE20")

        assert (await repos.coupons.find("SAVE20")).uses_count == 1

    async def test_missing_coupon_raises_not_found(self, repos, product):
        """Test applying an unknown code."""
        with pytest.raises(NotFoundError, match="Coupon not found"):
            await repos.discounts.apply_coupon(product.id, "NOPE1234")

    async def test_deleted_coupon_raises_not_found(self, repos, product, coupon_factory):
        """Test applying a soft-deleted coupon."""
        await repos.coupons.create(coupon_factory())
        await repos.coupons.delete("SAVE20")

        with pytest.raises(NotFoundError, match="Coupon not found"):
            await repos.discounts.apply_coupon(product.id, "SAVE20")

    async def test_deleted_product_raises_not_found(self, repos, product, coupon_factory):
        """Test applying to a soft-deleted product."""
        await repos.coupons.create(coupon_factory())
        await repos.products.delete(product.id)

        with pytest.raises(NotFoundError, match="Product not found"):
            await repos.discounts.apply_coupon(product.id, "SAVE20")

    async def test_coupon_below_minimum_price_is_unprocessable(
        self, repos, product, coupon_factory
    ):
        """Test that a fixed coupon above the price is refused without counting a use."""
        await repos.coupons.create(
            coupon_factory(code="HUGE0001", coupon_type=CouponType.FIXED, value=5000)
        )

        with pytest.raises(UnprocessableStateError, match="Final price must be at least 1 cent"):
            await repos.discounts.apply_coupon(product.id, "HUGE0001")

        assert (await repos.coupons.find("HUGE0001")).uses_count == 0
        assert await repos.products.has_discount(product.id) is False

    async def test_minimum_price_uses_current_price(self, repos, product, coupon_factory):
        """Test that the price check reads the product as it is when applying."""
        await repos.coupons.create(
            coupon_factory(code="FLAT2000", coupon_type=CouponType.FIXED, value=2000)
        )
        await repos.products.update(product.id, ProductUpdate(price=1500))

        with pytest.raises(UnprocessableStateError, match="Final price must be at least 1 cent"):
            await repos.discounts.apply_coupon(product.id, "FLAT2000")

        assert (await repos.coupons.find("FLAT2000")).uses_count == 0


class TestRemove:
    """Test closing applications."""

    async def test_apply_remove_apply_other(self, repos, product, coupon_factory):
        """Test that a new coupon can be applied once the old one is removed."""
        await repos.coupons.create(coupon_factory())
        await repos.coupons.create(coupon_factory(code="OTHER123", coupon_type=CouponType.FIXED, value=590))

        await repos.discounts.apply_coupon(product.id, "SAVE20")
        await repos.discounts.remove_coupon(product.id, "SAVE20")
        await repos.discounts.apply_coupon(product.id, "OTHER123")

        discount = await repos.discounts.find_active_discount(product.id)
        assert discount.code == "OTHER123"
        assert discount.final_price(product.price) == 2000

    async def test_remove_with_wrong_code_raises_not_found(self, repos, product, coupon_factory):
        """Test that removal by code requires that coupon to be active."""
        await repos.coupons.create(coupon_factory())
        await repos.discounts.apply_coupon(product.id, "SAVE20")

        with pytest.raises(NotFoundError, match="No active coupon found for product"):
            await repos.discounts.remove_coupon(product.id, "OTHER123")

        assert await repos.products.has_discount(product.id) is True

    async def test_remove_active_discount_without_any(self, repos, product):
        """Test that removing nothing is not found."""
        with pytest.raises(NotFoundError, match="No active discount found for product"):
            await repos.discounts.remove_active_discount(product.id)

    async def test_remove_active_discount_closes_percentage(self, repos, product):
        """Test that a direct percentage can be removed without a code."""
        await repos.discounts.apply_percentage(product.id, 25)
        await repos.discounts.remove_active_discount(product.id)

        assert await repos.discounts.find_active_discount(product.id) is None

    async def test_deleting_coupon_closes_its_applications(self, repos, product, coupon_factory):
        """Test that a deleted coupon no longer discounts products."""
        await repos.coupons.create(coupon_factory())
        await repos.discounts.apply_coupon(product.id, "SAVE20")
        await repos.coupons.delete("SAVE20")

        assert await repos.discounts.find_active_discount(product.id) is None
        assert await repos.products.has_discount(product.id) is False


class TestPercentage:
    """Test direct percentage discounts."""

    async def test_percentage_is_reported_in_basis_points(self, repos, product):
        """Test that a 25% discount reads back as 2500 bps without a code."""
        application = await repos.discounts.apply_percentage(product.id, 25)
        assert application.coupon_id is None
        assert application.percentage == 25

        discount = await repos.discounts.find_active_discount(product.id)
        assert discount.discount_type is CouponType.PERCENT
        assert discount.value == 2500
        assert discount.code is None

    async def test_percentage_conflicts_with_coupon(self, repos, product, coupon_factory):
        """Test that a direct discount counts as the one active discount."""
        await repos.coupons.create(coupon_factory())
        await repos.discounts.apply_coupon(product.id, "SAVE20")

        with pytest.raises(ConflictError):
            await repos.discounts.apply_percentage(product.id, 10)


class TestFindActive:
    """Test batch discount lookup."""

    async def test_batch_lookup_skips_products_without_discount(self, repos, product):
        """Test that only discounted products appear in the result."""
        other = await repos.products.create(NewProduct(name="Mouse", stock=5, price=900))
        await repos.discounts.apply_percentage(product.id, 10)

        found = await repos.discounts.find_active_discounts([product.id, other.id])
        assert set(found) == {product.id}

    async def test_empty_batch(self, repos):
        """Test that no ids gives no discounts."""
        assert await repos.discounts.find_active_discounts([]) == {}

    async def test_malformed_id_has_no_discount(self, repos):
        """Test lookups with a malformed id."""
        assert await repos.discounts.find_active_discount("not-a-uuid") is None


class TestActiveDiscountIndex:
    """Test the partial unique index behind the one-active-discount rule."""

    @pytest.fixture
    async def laptop(self, sqlite_repos):
        return await sqlite_repos.products.create(NewProduct(name="Laptop", stock=2, price=90000))

    async def test_index_rejects_second_active_row(self, sqlite_repos, laptop):
        """Test that the database refuses a second active application."""
        await sqlite_repos.discounts.apply_percentage(laptop.id, 10)

        with pytest.raises(IntegrityError):
            async with sqlite_repos.database.session_factory() as session:
                async with session.begin():
                    session.add(ProductDiscountModel(product_id=laptop.id, percentage=20))

    async def test_removed_rows_do_not_count(self, sqlite_repos, laptop):
        """Test that the index only covers active applications."""
        await sqlite_repos.discounts.apply_percentage(laptop.id, 10)
        await sqlite_repos.discounts.remove_active_discount(laptop.id)

        async with sqlite_repos.database.session_factory() as session:
            async with session.begin():
                session.add(ProductDiscountModel(product_id=laptop.id, percentage=20))

        assert (await sqlite_repos.discounts.find_active_discount(laptop.id)).value == 2000

    async def test_index_violation_becomes_conflict(
        self, sqlite_repos, laptop, coupon_factory, monkeypatch
    ):
        """Test that a race past the application check still ends in a conflict."""
        await sqlite_repos.coupons.create(coupon_factory())
        await sqlite_repos.coupons.create(coupon_factory(code="OTHER123"))
        await sqlite_repos.discounts.apply_coupon(laptop.id, "SAVE20")

        async def no_check(session, pid):
            return None

        monkeypatch.setattr(
            SQLAlchemyDiscountRepository, "_assert_no_active", staticmethod(no_check)
        )

        with pytest.raises(ConflictError, match="Product already has an active coupon"):
            await sqlite_repos.discounts.apply_coupon(laptop.id, "OTHER123")

        assert (await sqlite_repos.coupons.find("OTHER123")).uses_count == 0
        assert (await sqlite_repos.discounts.find_active_discount(laptop.id)).code == "SAVE20"
