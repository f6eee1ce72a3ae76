"""Tests for sf_common.errors and sf_common.response."""

import json

from src.sf_common.errors import (
    AppError,
    CacheReadError,
    ExportError,
    MalformedBodyError,
    RecordNotFoundError,
    StoreReadError,
    StoreWriteError,
)
from src.sf_common.response import app_error_response, error_response, message_response


class TestAppError:
    def test_base_error(self) -> None:
        err = AppError(code=9002, message="internal server error")
        assert err.code == 9002
        assert err.message == "internal server error"
        assert err.http_status == 500

    def test_custom_http_status(self) -> None:
        err = AppError(code=1001, message="bad body", http_status=400)
        assert err.http_status == 400

    def test_is_exception(self) -> None:
        assert isinstance(AppError(code=1, message="x"), Exception)


class TestSpecificErrors:
    def test_malformed_body(self) -> None:
        err = MalformedBodyError("invalid request body: id: Field required")
        assert err.code == 1001
        assert err.http_status == 400

    def test_record_not_found(self) -> None:
        err = RecordNotFoundError("product")
        assert err.code == 2001
        assert err.http_status == 404
        assert err.message == "product not found"

    def test_cache_read(self) -> None:
        err = CacheReadError()
        assert err.http_status == 500
        assert err.message == "failed to fetch from cache"

    def test_store_read_default_and_custom(self) -> None:
        assert StoreReadError().message == "failed to fetch from DB"
        assert StoreReadError("failed to fetch order").message == "failed to fetch order"

    def test_store_write_default(self) -> None:
        err = StoreWriteError()
        assert err.code == 3003
        assert err.message == "failed to save to DB"

    def test_export(self) -> None:
        err = ExportError("failed to save data to S3")
        assert err.code == 3004
        assert err.http_status == 500


class TestResponseBodies:
    def test_message_response(self) -> None:
        assert message_response("Product created successfully").model_dump() == {
            "message": "Product created successfully"
        }

    def test_error_response_body_is_single_string(self) -> None:
        resp = error_response("failed to fetch from DB", 500)
        assert resp.status_code == 500
        assert json.loads(resp.body) == {"error": "failed to fetch from DB"}

    def test_app_error_response_uses_status(self) -> None:
        resp = app_error_response(RecordNotFoundError("order"))
        assert resp.status_code == 404
        assert json.loads(resp.body) == {"error": "order not found"}
