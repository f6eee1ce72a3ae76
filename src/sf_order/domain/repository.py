# src/sf_order/domain/repository.py
"""Protocols for the order table and the export object store.

Unit tests inject mocks that conform to these Protocols.
"""

from typing import Protocol

from src.sf_order.domain.models import Order


class OrderRepositoryProtocol(Protocol):
    async def get_by_id(self, order_id: str) -> Order | None: ...

    async def save(self, order: Order) -> None: ...

    async def scan_all(self) -> list[Order]: ...


class ExportStoreProtocol(Protocol):
    async def put_object(self, key: str, body: bytes) -> None: ...
