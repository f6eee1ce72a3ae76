"""Order service entry point.

Run with: uvicorn src.sf_order.main:app --port 8080
     or: sf-order
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from config.settings import settings
from src.sf_common.app import create_service_app, run as run_service
from src.sf_common.aws import create_aws_clients
from src.sf_common.errors import ConfigurationError
from src.sf_order.api.router import export_router, router
from src.sf_order.application.service import OrderApplicationService
from src.sf_order.infrastructure.export_store import S3ExportStore
from src.sf_order.infrastructure.persistence import DynamoOrderRepository

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: build DynamoDB + S3 clients. A missing region is fatal."""
    try:
        dynamodb, s3 = create_aws_clients(settings)
    except ConfigurationError as exc:
        logger.critical("%s", exc)
        raise

    export_store = None
    if settings.S3_ACCESS_POINT_ARN:
        export_store = S3ExportStore(s3, settings.S3_ACCESS_POINT_ARN)
    else:
        logger.warning("S3_ACCESS_POINT_ARN is not set; POST /v1/s3/order will fail")

    app.state.service = OrderApplicationService(
        repo=DynamoOrderRepository(dynamodb, settings.ORDER_TABLE_NAME),
        export_store=export_store,
        export_key=settings.EXPORT_OBJECT_KEY,
        export_warn_items=settings.EXPORT_WARN_ITEMS,
    )
    yield


def create_app(service: OrderApplicationService | None = None) -> FastAPI:
    """Build the app. Passing `service` skips the lifespan wiring (tests)."""
    if service is None:
        app = create_service_app("order", lifespan=lifespan)
    else:
        app = create_service_app("order")
        app.state.service = service
    app.include_router(router, prefix="/v1")
    app.include_router(export_router, prefix="/v1")
    return app


app = create_app()


def run() -> None:
    run_service("src.sf_order.main:app")
