"""Unit tests for pagination value objects."""

import pytest

from domain.exceptions import ValidationFailedError
from domain.value_objects import PageRequest, PaginationMeta, paginate


class TestPageRequest:
    """Test PageRequest validation."""

    def test_defaults(self):
        """Test the default window."""
        request = PageRequest()
        assert request.page == 1
        assert request.limit == 10
        assert request.offset == 0

    def test_offset(self):
        """Test offset for later pages."""
        assert PageRequest(page=3, limit=20).offset == 40

    def test_zero_page_raises_error(self):
        """Test that pages start at 1."""
        with pytest.raises(ValidationFailedError, match="page must be at least 1"):
            PageRequest(page=0)

    @pytest.mark.parametrize("limit", [0, 101])
    def test_limit_out_of_range_raises_error(self, limit):
        """Test that limit must be within 1..100."""
        with pytest.raises(ValidationFailedError, match="limit"):
            PageRequest(limit=limit)


class TestPaginationMeta:
    """Test total page computation."""

    def test_total_pages_rounds_up(self):
        """Test that a partial last page counts."""
        meta = PaginationMeta.build(PageRequest(limit=10), 21)
        assert meta.total_pages == 3
        assert meta.total_items == 21

    def test_empty_dataset_has_zero_pages(self):
        """Test that no items means zero pages."""
        assert PaginationMeta.build(PageRequest(), 0).total_pages == 0


class TestPaginate:
    """Test slicing lists into pages."""

    def test_pages_partition_the_items(self):
        """Test that consecutive pages cover every item exactly once."""
        items = list(range(7))
        pages = [paginate(items, PageRequest(page=n, limit=3)) for n in (1, 2, 3)]

        assert [p.items for p in pages] == [[0, 1, 2], [3, 4, 5], [6]]
        assert all(p.meta.total_pages == 3 for p in pages)

    def test_page_past_the_end_is_empty(self):
        """Test that pages beyond the last one are empty with correct meta."""
        page = paginate(list(range(7)), PageRequest(page=5, limit=3))
        assert page.items == []
        assert page.meta.page == 5
        assert page.meta.total_items == 7
        assert page.meta.total_pages == 3
