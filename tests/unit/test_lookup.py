"""Tests for the shared record lookup result."""

import pytest

from src.sf_common.errors import CacheReadError, RecordNotFoundError, StoreReadError
from src.sf_common.lookup import (
    CacheFill,
    Dependency,
    Found,
    NotFound,
    RecordSource,
    StoreError,
    found_or_raise,
)


class TestFound:
    def test_defaults(self) -> None:
        found = Found("rec")
        assert found.source is RecordSource.STORE
        assert found.cache_fill is CacheFill.NOT_ATTEMPTED
        assert found.degraded is False

    def test_degraded_when_cache_fill_failed(self) -> None:
        assert Found("rec", RecordSource.STORE, CacheFill.FAILED).degraded is True


class TestFoundOrRaise:
    def test_found_is_returned_unchanged(self) -> None:
        found = Found("rec", RecordSource.CACHE)
        assert found_or_raise(found, "product") is found

    def test_not_found_raises_404(self) -> None:
        with pytest.raises(RecordNotFoundError) as exc_info:
            found_or_raise(NotFound("p-1"), "product")
        assert exc_info.value.message == "product not found"

    def test_cache_error_raises_cache_read_error(self) -> None:
        result = StoreError("p-1", RuntimeError("down"), Dependency.CACHE)
        with pytest.raises(CacheReadError):
            found_or_raise(result, "product")

    def test_store_error_uses_given_message(self) -> None:
        with pytest.raises(StoreReadError) as exc_info:
            found_or_raise(StoreError("o-1", RuntimeError("down")), "order", "failed to fetch order")
        assert exc_info.value.message == "failed to fetch order"
