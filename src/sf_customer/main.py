"""Customer service entry point.

Run with: uvicorn src.sf_customer.main:app --port 8080
     or: sf-customer
"""

import redis.asyncio as aioredis
from fastapi import FastAPI

from config.settings import settings
from src.sf_common.app import create_service_app, run as run_service, sql_cache_lifespan
from src.sf_common.record_cache import RecordCache
from src.sf_customer.api.router import router
from src.sf_customer.application.service import CustomerApplicationService
from src.sf_customer.domain.models import Customer


def build_service(redis: aioredis.Redis) -> CustomerApplicationService:
    return CustomerApplicationService(
        cache=RecordCache(redis, Customer, settings.CACHE_KEY_PREFIX),
    )


def create_app(service: CustomerApplicationService | None = None) -> FastAPI:
    """Build the app. Passing `service` skips the lifespan wiring (tests)."""
    if service is None:
        app = create_service_app("customer", lifespan=sql_cache_lifespan(build_service))
    else:
        app = create_service_app("customer")
        app.state.service = service
    app.include_router(router, prefix="/v1")
    return app


app = create_app()


def run() -> None:
    run_service("src.sf_customer.main:app")
