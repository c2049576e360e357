"""Unit tests for Product entity and its payloads."""

import pytest

from domain.entities import NewProduct, ProductUpdate, Product, normalize_name, name_key
from domain.exceptions import ValidationFailedError


class TestNameNormalization:
    """Test product name normalisation."""

    def test_trims_and_collapses_whitespace(self):
        """Test that surrounding whitespace is trimmed and runs collapsed."""
        assert normalize_name("  Mechanical   Keyboard \t") == "Mechanical Keyboard"

    def test_name_key_ignores_case_and_spacing(self):
        """Test that names differing only by case/whitespace share a key."""
        assert name_key("mechanical keyboard") == name_key("  MECHANICAL  Keyboard ")

    def test_new_product_stores_normalized_name(self):
        """Test that NewProduct keeps the normalised name."""
        data = NewProduct(name="  Desk   Lamp ", stock=1, price=100)
        assert data.name == "Desk Lamp"


class TestNewProductValidation:
    """Test NewProduct field ranges."""

    def test_valid_product(self, keyboard):
        """Test that a product within every range is accepted."""
        assert keyboard.price == 2590
        assert keyboard.stock == 250

    def test_blank_name_raises_error(self):
        """Test that a whitespace-only name is rejected."""
        with pytest.raises(ValidationFailedError, match="name must be between 1 and 100"):
            NewProduct(name="   ", stock=1, price=100)

    def test_name_longer_than_100_raises_error(self):
        """Test that names over 100 characters are rejected."""
        with pytest.raises(ValidationFailedError):
            NewProduct(name="x" * 101, stock=1, price=100)

    def test_name_of_exactly_100_is_valid(self):
        """Test the upper name length bound (edge case)."""
        assert len(NewProduct(name="x" * 100, stock=1, price=100).name) == 100

    def test_long_description_raises_error(self):
        """Test that descriptions over 300 characters are rejected."""
        with pytest.raises(ValidationFailedError, match="description"):
            NewProduct(name="Lamp", description="d" * 301, stock=1, price=100)

    @pytest.mark.parametrize("stock", [-1, 1_000_000])
    def test_stock_out_of_range_raises_error(self, stock):
        """Test that stock outside 0..999999 is rejected."""
        with pytest.raises(ValidationFailedError, match="stock"):
            NewProduct(name="Lamp", stock=stock, price=100)

    def test_zero_price_raises_error(self):
        """Test that a price below one cent is rejected."""
        with pytest.raises(ValidationFailedError, match="price must be at least 1"):
            NewProduct(name="Lamp", stock=1, price=0)

    def test_validation_error_is_value_error(self):
        """Test that validation failures are also ValueErrors."""
        with pytest.raises(ValueError):
            NewProduct(name="Lamp", stock=-5, price=100)


class TestProductUpdate:
    """Test partial product updates."""

    def test_changes_only_include_supplied_fields(self):
        """Test that None fields are left out of the change set."""
        assert ProductUpdate(stock=120).changes() == {"stock": 120}

    def test_patch_operations_use_replace(self):
        """Test that each supplied field becomes a replace operation."""
        ops = ProductUpdate(name=" New  Name ", price=999).patch_operations()
        assert [op.to_dict() for op in ops] == [
            {"op": "replace", "path": "/name", "value": "New Name"},
            {"op": "replace", "path": "/price", "value": 999},
        ]

    def test_invalid_price_raises_error(self):
        """Test that updates are validated like creations."""
        with pytest.raises(ValidationFailedError):
            ProductUpdate(price=0)

    def test_merged_keeps_untouched_fields(self, keyboard):
        """Test that merging a stock-only update keeps everything else."""
        product = Product.create(keyboard)
        updated = product.merged(ProductUpdate(stock=3))

        assert updated.stock == 3
        assert updated.name == product.name
        assert updated.price == product.price
        assert updated.description == product.description
        assert updated.id == product.id
        assert updated.updated_at is not None
        assert product.updated_at is None


class TestProductState:
    """Test derived product state."""

    def test_out_of_stock_when_stock_is_zero(self):
        """Test is_out_of_stock for an empty product."""
        product = Product.create(NewProduct(name="Lamp", stock=0, price=100))
        assert product.is_out_of_stock is True

    def test_new_product_is_not_deleted(self, keyboard):
        """Test that created products are live."""
        product = Product.create(keyboard)
        assert product.is_deleted is False
        assert product.is_out_of_stock is False
