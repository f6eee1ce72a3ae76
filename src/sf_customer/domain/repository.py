# src/sf_customer/domain/repository.py
"""Repository Protocol — dependency inversion for testability.

Unit tests inject a mock that conforms to this Protocol.
Infrastructure layer provides the real implementation.
"""

from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from src.sf_customer.domain.models import Customer


class CustomerRepositoryProtocol(Protocol):
    async def get_by_id(self, db: AsyncSession, record_id: str) -> Customer | None: ...

    async def insert(self, db: AsyncSession, record: Customer) -> None: ...
