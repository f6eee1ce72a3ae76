"""JSON bodies shared by all services.

Success bodies are either the record itself or a static message:
    {"message": "Product created successfully"}

Error bodies carry a single fixed string:
    {"error": "failed to fetch from DB"}
"""

from fastapi import Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from src.sf_common.errors import AppError
from src.sf_common.lookup import CacheFill, Found, RecordSource

CACHE_HEADER = "X-Cache"
CACHE_FILL_HEADER = "X-Cache-Fill"


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str


def message_response(message: str) -> MessageResponse:
    return MessageResponse(message=message)


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


def app_error_response(exc: AppError) -> JSONResponse:
    return error_response(exc.message, exc.http_status)


def set_cache_fill_header(response: Response, cache_fill: CacheFill) -> None:
    """X-Cache-Fill: stored|failed. Omitted when no fill was attempted."""
    if cache_fill is not CacheFill.NOT_ATTEMPTED:
        response.headers[CACHE_FILL_HEADER] = cache_fill.value


def set_lookup_headers(response: Response, found: Found[object]) -> None:
    response.headers[CACHE_HEADER] = "hit" if found.source is RecordSource.CACHE else "miss"
    set_cache_fill_header(response, found.cache_fill)


# OpenAPI ``responses=`` fragments for routers
NOT_FOUND_RESPONSES: dict[int | str, dict[str, object]] = {
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}
WRITE_RESPONSES: dict[int | str, dict[str, object]] = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}
