"""ProductRepository — raw SQL persistence implementation.

INSERT is unconditional: a duplicate id raises the driver's IntegrityError,
which the service reports as a store write failure.
"""
from typing import Any

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from src.sf_product.domain.models import Product

# ---------------------------------------------------------------------------
# SQL statements
# ---------------------------------------------------------------------------

_GET_PRODUCT_SQL = text("""
    SELECT id, name, category
    FROM product
    WHERE id = :id
""")

_INSERT_PRODUCT_SQL = text("""
    INSERT INTO product (id, name, category)
    VALUES (:id, :name, :category)
""")


# ---------------------------------------------------------------------------
# Row mapper
# ---------------------------------------------------------------------------


def _row_to_product(row: Any) -> Product:
    return Product(id=row.id, name=row.name, category=row.category)


# ---------------------------------------------------------------------------
# Repository
# ---------------------------------------------------------------------------


class ProductRepository:
    async def get_by_id(self, db: AsyncSession, record_id: str) -> Product | None:
        result = await db.execute(_GET_PRODUCT_SQL, {"id": record_id})
        row = result.fetchone()
        return _row_to_product(row) if row else None

    async def insert(self, db: AsyncSession, record: Product) -> None:
        await db.execute(
            _INSERT_PRODUCT_SQL,
            {"id": record.id, "name": record.name, "category": record.category},
        )
