"""Shared test fixtures: in-memory stand-ins for Redis and the SQL repositories."""

from collections.abc import AsyncGenerator
from typing import Any
from unittest.mock import MagicMock

import pytest
from httpx import ASGITransport, AsyncClient
from redis.exceptions import ConnectionError as RedisConnectionError
from sqlalchemy.exc import IntegrityError, OperationalError

from src.sf_common.database import get_db_session
from src.sf_common.record_cache import RecordCache
from src.sf_customer.application.service import CustomerApplicationService
from src.sf_customer.domain.models import Customer
from src.sf_customer.main import create_app as create_customer_app
from src.sf_product.application.service import ProductApplicationService
from src.sf_product.domain.models import Product
from src.sf_product.main import create_app as create_product_app


class FakeRedis:
    """Dict-backed subset of redis.asyncio.Redis (GET/SET) with failure switches."""

    def __init__(self) -> None:
        self.data: dict[str, str | bytes] = {}
        self.fail_get = False
        self.fail_set = False
        self.set_calls: list[tuple[str, str | bytes, Any]] = []

    async def get(self, key: str) -> str | bytes | None:
        if self.fail_get:
            raise RedisConnectionError("cache down")
        return self.data.get(key)

    async def set(self, key: str, value: str | bytes, ex: Any = None) -> bool:
        if self.fail_set:
            raise RedisConnectionError("cache down")
        self.set_calls.append((key, value, ex))
        self.data[key] = value
        return True


class InMemoryRecordRepository:
    """Table stand-in keyed by id; INSERT of an existing id raises IntegrityError."""

    def __init__(self) -> None:
        self.rows: dict[str, Any] = {}
        self.fail_reads = False
        self.read_calls = 0
        self.insert_calls = 0

    async def get_by_id(self, db: Any, record_id: str) -> Any:
        self.read_calls += 1
        if self.fail_reads:
            raise OperationalError("SELECT", {}, Exception("db down"))
        return self.rows.get(record_id)

    async def insert(self, db: Any, record: Any) -> None:
        self.insert_calls += 1
        if record.id in self.rows:
            raise IntegrityError("INSERT", {}, Exception("Duplicate entry"))
        self.rows[record.id] = record


async def _fake_db_session() -> AsyncGenerator[MagicMock, None]:
    yield MagicMock()


@pytest.fixture
def fake_redis() -> FakeRedis:
    return FakeRedis()


@pytest.fixture
def record_repo() -> InMemoryRecordRepository:
    return InMemoryRecordRepository()


@pytest.fixture
def product_service(
    fake_redis: FakeRedis, record_repo: InMemoryRecordRepository
) -> ProductApplicationService:
    return ProductApplicationService(
        cache=RecordCache(fake_redis, Product),  # type: ignore[arg-type]
        repo=record_repo,
    )


@pytest.fixture
def customer_service(
    fake_redis: FakeRedis, record_repo: InMemoryRecordRepository
) -> CustomerApplicationService:
    return CustomerApplicationService(
        cache=RecordCache(fake_redis, Customer),  # type: ignore[arg-type]
        repo=record_repo,
    )


@pytest.fixture
async def product_client(product_service: ProductApplicationService) -> AsyncClient:
    app = create_product_app(service=product_service)
    app.dependency_overrides[get_db_session] = _fake_db_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def customer_client(customer_service: CustomerApplicationService) -> AsyncClient:
    app = create_customer_app(service=customer_service)
    app.dependency_overrides[get_db_session] = _fake_db_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
