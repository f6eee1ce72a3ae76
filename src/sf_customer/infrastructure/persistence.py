"""CustomerRepository — raw SQL against the `customer` table."""
from typing import Any

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from src.sf_customer.domain.models import Customer

# ---------------------------------------------------------------------------
# SQL statements
# ---------------------------------------------------------------------------

_GET_PRODUCT_SQL = text("""
    SELECT id, name, gender
    FROM customer
    WHERE id = :id
""")

_INSERT_PRODUCT_SQL = text("""
    INSERT INTO customer (id, name, gender)
    VALUES (:id, :name, :gender)
""")


# ---------------------------------------------------------------------------
# Row mapper
# ---------------------------------------------------------------------------


def _row_to_customer(row: Any) -> Customer:
    return Customer(id=row.id, name=row.name, gender=row.gender)


# ---------------------------------------------------------------------------
# Repository
# ---------------------------------------------------------------------------


class CustomerRepository:
    async def get_by_id(self, db: AsyncSession, record_id: str) -> Customer | None:
        result = await db.execute(_GET_PRODUCT_SQL, {"id": record_id})
        row = result.fetchone()
        return _row_to_customer(row) if row else None

    async def insert(self, db: AsyncSession, record: Customer) -> None:
        await db.execute(
            _INSERT_PRODUCT_SQL,
            {"id": record.id, "name": record.name, "gender": record.gender},
        )
