"""Product service entry point.

Run with: uvicorn src.sf_product.main:app --port 8080
     or: sf-product
"""

import redis.asyncio as aioredis
from fastapi import FastAPI

from config.settings import settings
from src.sf_common.app import create_service_app, run as run_service, sql_cache_lifespan
from src.sf_common.record_cache import RecordCache
from src.sf_product.api.router import router
from src.sf_product.application.service import ProductApplicationService
from src.sf_product.domain.models import Product


def build_service(redis: aioredis.Redis) -> ProductApplicationService:
    return ProductApplicationService(
        cache=RecordCache(redis, Product, settings.CACHE_KEY_PREFIX),
    )


def create_app(service: ProductApplicationService | None = None) -> FastAPI:
    """Build the app. Passing `service` skips the lifespan wiring (tests)."""
    if service is None:
        app = create_service_app("product", lifespan=sql_cache_lifespan(build_service))
    else:
        app = create_service_app("product")
        app.state.service = service
    app.include_router(router, prefix="/v1")
    return app


app = create_app()


def run() -> None:
    run_service("src.sf_product.main:app")
