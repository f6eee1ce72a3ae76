# tests/unit/test_product_persistence.py
"""Unit tests for ProductRepository using MagicMock AsyncSession."""
from unittest.mock import AsyncMock, MagicMock

from src.sf_product.domain.models import Product
from src.sf_product.infrastructure.persistence import ProductRepository


def _make_row(**kwargs: str) -> MagicMock:
    row = MagicMock()
    row.id = kwargs.get("id", "p-1")
    row.name = kwargs.get("name", "Lamp")
    row.category = kwargs.get("category", "home")
    return row


class TestProductRepository:
    async def test_get_by_id_returns_product(self) -> None:
        db = AsyncMock()
        result_mock = MagicMock()
        result_mock.fetchone.return_value = _make_row()
        db.execute.return_value = result_mock

        product = await ProductRepository().get_by_id(db, "p-1")

        assert product == Product(id="p-1", name="Lamp", category="home")
        assert db.execute.call_args.args[1] == {"id": "p-1"}

    async def test_get_by_id_returns_none_when_not_found(self) -> None:
        db = AsyncMock()
        result_mock = MagicMock()
        result_mock.fetchone.return_value = None
        db.execute.return_value = result_mock

        assert await ProductRepository().get_by_id(db, "missing") is None

    async def test_insert_executes_once_with_all_columns(self) -> None:
        db = AsyncMock()

        await ProductRepository().insert(db, Product(id="p-2", name="Desk", category="office"))

        db.execute.assert_awaited_once()
        sql, params = db.execute.call_args.args
        assert "INSERT INTO product" in str(sql)
        assert params == {"id": "p-2", "name": "Desk", "category": "office"}
