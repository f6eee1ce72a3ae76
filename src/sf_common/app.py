"""FastAPI app factory shared by the order, product and customer services.

Each service builds its app with create_service_app() and stores its
application service on app.state.service, either in its lifespan (real
clients) or directly (tests passing fakes).
"""

import logging
from collections.abc import AsyncGenerator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import Any

import redis.asyncio as aioredis
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from config.settings import settings
from src.sf_common.database import check_connection, create_engine, create_session_factory
from src.sf_common.errors import AppError, ConfigurationError, MalformedBodyError
from src.sf_common.logging_config import setup_logging
from src.sf_common.middleware.request_log import RequestLogMiddleware
from src.sf_common.redis_client import check_redis_connection, close_redis, create_redis
from src.sf_common.response import app_error_response, error_response

logger = logging.getLogger(__name__)

Lifespan = Callable[[FastAPI], AbstractAsyncContextManager[None]]


def _validation_detail(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "invalid request body"
    first = errors[0]
    loc = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    msg = first.get("msg", "invalid value")
    return f"invalid request body: {loc}: {msg}" if loc else f"invalid request body: {msg}"


def create_service_app(name: str, lifespan: Lifespan | None = None) -> FastAPI:
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=f"{settings.APP_NAME} {name} service",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.add_middleware(RequestLogMiddleware, service=name)

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        return app_error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return app_error_response(MalformedBodyError(_validation_detail(exc)))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return error_response("internal server error", 500)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok", "service": name}

    return app


def get_service(request: Request) -> Any:
    """FastAPI dependency: the application service built at startup."""
    return request.app.state.service


def sql_cache_lifespan(build_service: Callable[[aioredis.Redis], Any]) -> Lifespan:
    """Lifespan for the relational + cache services.

    Startup: require DATABASE_URL, verify DB, ping Redis (logged only),
    then build the application service. Shutdown: dispose both pools.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        try:
            engine = create_engine(settings)
        except ConfigurationError as exc:
            logger.critical("failed to connect to database: %s", exc)
            raise

        try:
            await check_connection(engine)
        except Exception:
            logger.critical("failed to connect to database", exc_info=True)
            await engine.dispose()
            raise

        redis = create_redis(settings.REDIS_URL)
        await check_redis_connection(redis)

        app.state.session_factory = create_session_factory(engine)
        app.state.service = build_service(redis)
        yield
        await engine.dispose()
        await close_redis(redis)

    return lifespan


def run(app_path: str) -> None:
    """Console-script entry point: serve one service on HOST:PORT."""
    uvicorn.run(app_path, host=settings.HOST, port=settings.PORT, loop="uvloop")
