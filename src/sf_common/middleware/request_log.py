"""Per-request access log for the storefront services.

One line per request with the service name, method, path, status, latency,
cache outcome and request id. A caller-supplied X-Request-ID is kept so a
request can be followed across order/product/customer; otherwise a short id
is generated. Either way it lands on request.state.request_id and is echoed
in the X-Request-ID response header.

Log format:
    INFO product GET /v1/product → 200 (4ms) cache=hit/- req_a1b2c3d4e5f6
"""

import logging
import re
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

logger = logging.getLogger("sf.request")

REQUEST_ID_HEADER = "X-Request-ID"

_VALID_REQUEST_ID = re.compile(r"^[A-Za-z0-9._:-]{1,64}$")


def resolve_request_id(incoming: str | None) -> str:
    """Keep a well-formed incoming id, else mint one."""
    if incoming and _VALID_REQUEST_ID.match(incoming):
        return incoming
    return f"req_{uuid.uuid4().hex[:12]}"


class RequestLogMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp, service: str = "-") -> None:
        super().__init__(app)
        self.service = service

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        request.state.request_id = request_id

        start = time.perf_counter()
        response: Response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000

        response.headers[REQUEST_ID_HEADER] = request_id
        logger.info(
            "%s %s %s → %d (%.0fms) cache=%s/%s %s",
            self.service,
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            response.headers.get("X-Cache", "-"),
            response.headers.get("X-Cache-Fill", "-"),
            request_id,
        )
        return response
