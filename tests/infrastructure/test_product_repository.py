"""Product repository behaviour, shared by every storage backend."""

from uuid import uuid4

import pytest

from domain.entities import NewProduct, ProductUpdate
from domain.exceptions import ConflictError, NotFoundError
from domain.value_objects import PageRequest


async def create_products(repo, count, price=100):
    created = []
    for n in range(count):
        created.append(await repo.create(NewProduct(name=f"Item {n}", stock=n, price=price + n)))
    return created


class TestCreateAndFind:
    """Test product creation and lookup."""

    async def test_created_product_is_echoed(self, repos, keyboard):
        """Test that every stored field round-trips exactly."""
        created = await repos.products.create(keyboard)
        found = await repos.products.find(created.id)

        assert found.id == created.id
        assert found.name == "Mechanical Keyboard"
        assert found.description == "Hot-swappable, 75% layout"
        assert found.stock == 250
        assert found.price == 2590
        assert found.deleted_at is None

    async def test_find_accepts_string_id(self, repos, keyboard):
        """Test lookup by the textual id."""
        created = await repos.products.create(keyboard)
        assert (await repos.products.find(str(created.id))).id == created.id

    async def test_find_unknown_raises_not_found(self, repos):
        """Test that unknown ids are not found."""
        with pytest.raises(NotFoundError, match="Product not found"):
            await repos.products.find(uuid4())

    async def test_find_malformed_id_raises_not_found(self, repos):
        """Test that malformed ids are reported as not found."""
        with pytest.raises(NotFoundError, match="Product not found"):
            await repos.products.find("not-a-uuid")

    async def test_name_conflicts_ignore_case_and_whitespace(self, repos, keyboard):
        """Test that names differing only by case/whitespace conflict."""
        await repos.products.create(keyboard)
        with pytest.raises(ConflictError, match="Product already exists"):
            await repos.products.create(
                NewProduct(name="  mechanical   KEYBOARD ", stock=1, price=1)
            )

    async def test_accented_names_conflict_ignoring_case(self, repos):
        """Test that case folding covers non-ASCII letters."""
        await repos.products.create(NewProduct(name="ÉCLAIR Box", stock=3, price=450))

        with pytest.raises(ConflictError, match="Product already exists"):
            await repos.products.create(NewProduct(name="éclair box", stock=1, price=1))

    async def test_renamed_product_frees_its_old_name(self, repos):
        """Test that the uniqueness key follows a rename."""
        created = await repos.products.create(NewProduct(name="Café Premium", stock=3, price=900))
        await repos.products.update(created.id, ProductUpdate(name="Café Classic"))

        again = await repos.products.create(NewProduct(name="CAFÉ PREMIUM", stock=1, price=900))
        assert again.name == "CAFÉ PREMIUM"


class TestSoftDelete:
    """Test soft deletion and restoration."""

    async def test_deleted_product_is_not_found(self, repos, keyboard):
        """Test that find never returns soft-deleted products."""
        created = await repos.products.create(keyboard)
        await repos.products.delete(created.id)

        with pytest.raises(NotFoundError):
            await repos.products.find(created.id)

    async def test_delete_twice_raises_not_found(self, repos, keyboard):
        """Test that an already deleted product cannot be deleted again."""
        created = await repos.products.create(keyboard)
        await repos.products.delete(created.id)

        with pytest.raises(NotFoundError):
            await repos.products.delete(created.id)

    async def test_deleted_name_can_be_reused(self, repos, keyboard):
        """Test that uniqueness only applies among live products."""
        created = await repos.products.create(keyboard)
        await repos.products.delete(created.id)

        again = await repos.products.create(keyboard)
        assert again.id != created.id

    async def test_deleted_products_are_not_listed(self, repos, keyboard):
        """Test that listings skip soft-deleted products."""
        created = await repos.products.create(keyboard)
        await repos.products.delete(created.id)

        page = await repos.products.find_all(PageRequest())
        assert page.items == []
        assert page.meta.total_items == 0

    async def test_restore_brings_product_back(self, repos, keyboard):
        """Test that a restored product is live again."""
        created = await repos.products.create(keyboard)
        await repos.products.delete(created.id)

        restored = await repos.products.restore(created.id)
        assert restored.deleted_at is None
        assert (await repos.products.find(created.id)).name == keyboard.name

    async def test_restore_live_product_raises_not_found(self, repos, keyboard):
        """Test that only deleted products can be restored."""
        created = await repos.products.create(keyboard)
        with pytest.raises(NotFoundError):
            await repos.products.restore(created.id)

    async def test_restore_with_reused_name_raises_conflict(self, repos, keyboard):
        """Test that restore fails when the name was taken meanwhile."""
        created = await repos.products.create(keyboard)
        await repos.products.delete(created.id)
        await repos.products.create(keyboard)

        with pytest.raises(ConflictError, match="Product already exists"):
            await repos.products.restore(created.id)


class TestUpdate:
    """Test partial updates."""

    async def test_stock_only_update_keeps_other_fields(self, repos, keyboard):
        """Test that untouched fields survive and updated_at is refreshed."""
        created = await repos.products.create(keyboard)
        await repos.products.update(created.id, ProductUpdate(stock=120))

        found = await repos.products.find(created.id)
        assert found.stock == 120
        assert found.name == created.name
        assert found.description == created.description
        assert found.price == created.price
        assert found.updated_at is not None

    async def test_rename_to_own_name_in_other_case_is_allowed(self, repos, keyboard):
        """Test that a product does not conflict with itself."""
        created = await repos.products.create(keyboard)
        await repos.products.update(created.id, ProductUpdate(name="MECHANICAL KEYBOARD"))

        assert (await repos.products.find(created.id)).name == "MECHANICAL KEYBOARD"

    async def test_rename_to_taken_name_raises_conflict(self, repos, keyboard):
        """Test that renames respect uniqueness."""
        await repos.products.create(keyboard)
        other = await repos.products.create(NewProduct(name="Mouse", stock=1, price=10))

        with pytest.raises(ConflictError):
            await repos.products.update(other.id, ProductUpdate(name="mechanical keyboard"))

    async def test_update_deleted_raises_not_found(self, repos, keyboard):
        """Test that deleted products cannot be updated."""
        created = await repos.products.create(keyboard)
        await repos.products.delete(created.id)

        with pytest.raises(NotFoundError):
            await repos.products.update(created.id, ProductUpdate(stock=1))


class TestListing:
    """Test filtering and pagination."""

    async def test_pages_partition_the_dataset(self, repos):
        """Test that consecutive pages cover every product exactly once."""
        created = await create_products(repos.products, 5)

        seen = []
        for number in (1, 2, 3):
            page = await repos.products.find_all(PageRequest(page=number, limit=2))
            assert page.meta.total_items == 5
            assert page.meta.total_pages == 3
            seen.extend(p.id for p in page.items)

        assert sorted(seen) == sorted(p.id for p in created)
        assert len(seen) == len(set(seen))

    async def test_page_past_the_end_is_empty(self, repos):
        """Test that a page beyond the last one is empty with correct meta."""
        await create_products(repos.products, 3)

        page = await repos.products.find_all(PageRequest(page=4, limit=2))
        assert page.items == []
        assert page.meta.total_items == 3
        assert page.meta.total_pages == 2

    async def test_newest_first(self, repos):
        """Test that listings are ordered by creation time, newest first."""
        created = await create_products(repos.products, 3)

        page = await repos.products.find_all(PageRequest())
        assert [p.id for p in page.items] == [p.id for p in reversed(created)]

    async def test_search_matches_name_or_description(self, repos, keyboard):
        """Test case-insensitive substring search."""
        await repos.products.create(keyboard)
        await repos.products.create(NewProduct(name="Mouse", stock=1, price=10))

        by_name = await repos.products.find_all(PageRequest(), search="KEYB")
        by_description = await repos.products.find_all(PageRequest(), search="hot-swap")

        assert [p.name for p in by_name.items] == ["Mechanical Keyboard"]
        assert [p.name for p in by_description.items] == ["Mechanical Keyboard"]

    async def test_search_treats_wildcards_literally(self, repos, keyboard):
        """Test that % in a search term is not a wildcard."""
        await repos.products.create(keyboard)
        await repos.products.create(NewProduct(name="Mouse", stock=1, price=10))

        page = await repos.products.find_all(PageRequest(), search="75%")
        assert [p.name for p in page.items] == ["Mechanical Keyboard"]

    async def test_search_folds_accented_letters(self, repos):
        """Test that search ignores case for non-ASCII letters."""
        await repos.products.create(
            NewProduct(name="ÉCLAIR Box", description="CRÈME filled", stock=3, price=450)
        )
        await repos.products.create(NewProduct(name="Mouse", stock=1, price=10))

        by_name = await repos.products.find_all(PageRequest(), search="éclair")
        by_description = await repos.products.find_all(PageRequest(), search="crème")

        assert by_name.meta.total_items == 1
        assert [p.name for p in by_description.items] == ["ÉCLAIR Box"]

    async def test_price_bounds_are_inclusive(self, repos):
        """Test min_price and max_price filters."""
        await create_products(repos.products, 5, price=100)

        page = await repos.products.find_all(PageRequest(), min_price=101, max_price=103)
        assert sorted(p.price for p in page.items) == [101, 102, 103]

    async def test_has_discount_filter(self, repos):
        """Test filtering by active discount in both directions."""
        discounted, plain = await create_products(repos.products, 2)
        await repos.discounts.apply_percentage(discounted.id, 10)

        with_discount = await repos.products.find_all(PageRequest(), has_discount=True)
        without_discount = await repos.products.find_all(PageRequest(), has_discount=False)

        assert [p.id for p in with_discount.items] == [discounted.id]
        assert [p.id for p in without_discount.items] == [plain.id]
        assert await repos.products.has_discount(discounted.id) is True
        assert await repos.products.has_discount(plain.id) is False

    async def test_has_discount_for_malformed_id_is_false(self, repos):
        """Test that malformed ids never have a discount."""
        assert await repos.products.has_discount("nope") is False
