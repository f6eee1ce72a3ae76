"""Endpoint tests for the customer service."""

import json

from httpx import AsyncClient

from src.sf_customer.domain.models import Customer

_ADA = {"id": "c-1", "name": "Ada", "gender": "F"}


async def test_create_then_read_round_trip(customer_client: AsyncClient, record_repo) -> None:
    created = await customer_client.post("/v1/customer", json=_ADA)
    assert created.status_code == 201
    assert created.json() == {"message": "Customer created successfully"}

    resp = await customer_client.get("/v1/customer", params={"id": "c-1"})

    assert resp.status_code == 200
    assert resp.json() == _ADA
    assert record_repo.read_calls == 0


async def test_read_populates_cache(customer_client: AsyncClient, record_repo, fake_redis) -> None:
    record_repo.rows["c-1"] = Customer(**_ADA)

    first = await customer_client.get("/v1/customer", params={"id": "c-1"})
    second = await customer_client.get("/v1/customer", params={"id": "c-1"})

    assert first.headers["X-Cache"] == "miss"
    assert second.headers["X-Cache"] == "hit"
    assert record_repo.read_calls == 1
    assert json.loads(fake_redis.data["c-1"]) == _ADA


async def test_unknown_customer_is_404(customer_client: AsyncClient) -> None:
    resp = await customer_client.get("/v1/customer", params={"id": "ghost"})

    assert resp.status_code == 404
    assert resp.json() == {"error": "customer not found"}


async def test_malformed_body_writes_nothing(
    customer_client: AsyncClient, record_repo, fake_redis
) -> None:
    resp = await customer_client.post(
        "/v1/customer", content=b"not-json", headers={"Content-Type": "application/json"}
    )

    assert resp.status_code == 400
    assert record_repo.insert_calls == 0
    assert fake_redis.set_calls == []


async def test_missing_gender_is_stored_empty(customer_client: AsyncClient, record_repo) -> None:
    resp = await customer_client.post("/v1/customer", json={"id": "c-1", "name": "Ana"})

    assert resp.status_code == 201
    read = await customer_client.get("/v1/customer", params={"id": "c-1"})
    assert read.json() == {"id": "c-1", "name": "Ana", "gender": ""}
