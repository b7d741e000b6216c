"""Tests for pagination."""

from unittest.mock import patch

import pytest

from moverchart.pagination import page_count, paginate


class TestPaginate:
    """Test cases for paginate."""

    def test_eight_records_make_two_pages(self, request_factory):
        """✅ 8 records at capacity 7 give pages of 7 and 1."""
        pages = paginate(request_factory(8), page_capacity=7)

        assert [len(page.records) for page in pages] == [7, 1]
        assert [page.number for page in pages] == [1, 2]
        assert all(page.count == 2 for page in pages)

    @pytest.mark.parametrize(
        "record_count,capacity",
        [(1, 7), (6, 7), (7, 7), (8, 7), (14, 7), (15, 7), (5, 1), (10, 3)],
    )
    def test_page_count_and_order(self, request_factory, record_count, capacity):
        """✅ ceil(n / capacity) pages whose records concatenate to the input."""
        request = request_factory(record_count)
        pages = paginate(request, page_capacity=capacity)

        assert len(pages) == page_count(record_count, capacity)
        assert tuple(r for page in pages for r in page.records) == request.records
        assert all(0 < len(page.records) <= capacity for page in pages)

    def test_titles_are_inherited(self, request_factory):
        request = request_factory(9)
        for page in paginate(request, page_capacity=4):
            assert page.title_main == "Sep 15"
            assert page.title_sub == "Big Movers & Drivers"

    def test_records_are_shared_not_copied(self, request_factory):
        request = request_factory(3)
        page = paginate(request, page_capacity=7)[0]
        assert page.records[0] is request.records[0]

    def test_default_capacity_from_settings(self, request_factory):
        with patch("moverchart.pagination.settings") as mock_settings:
            mock_settings.page_capacity = 2
            pages = paginate(request_factory(5))

        assert [len(page.records) for page in pages] == [2, 2, 1]

    def test_invalid_capacity(self, request_factory):
        """❌ Capacity below 1 is rejected."""
        with pytest.raises(ValueError):
            paginate(request_factory(3), page_capacity=0)
