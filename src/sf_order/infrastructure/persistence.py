"""DynamoOrderRepository — order items in a DynamoDB table.

Items are flat string attributes: {"id": {"S"}, "customerid": {"S"}, "productid": {"S"}}.
A missing or non-string attribute decodes as "".

boto3 is blocking; every call runs in a worker thread.
"""

import asyncio
import logging
from typing import Any

from src.sf_order.domain.models import Order

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Item mappers
# ---------------------------------------------------------------------------


def _string_attr(item: dict[str, Any], name: str) -> str:
    value = item.get(name)
    if isinstance(value, dict) and isinstance(value.get("S"), str):
        return value["S"]
    return ""


def _item_to_order(item: dict[str, Any]) -> Order:
    return Order(
        id=_string_attr(item, "id"),
        customer_id=_string_attr(item, "customerid"),
        product_id=_string_attr(item, "productid"),
    )


def _order_to_item(order: Order) -> dict[str, dict[str, str]]:
    return {
        "id": {"S": order.id},
        "customerid": {"S": order.customer_id},
        "productid": {"S": order.product_id},
    }


# ---------------------------------------------------------------------------
# Repository
# ---------------------------------------------------------------------------


class DynamoOrderRepository:
    """Errors (botocore ClientError / BotoCoreError) propagate to the service."""

    def __init__(self, client: Any, table_name: str) -> None:
        self._client = client
        self._table_name = table_name

    async def get_by_id(self, order_id: str) -> Order | None:
        result = await asyncio.to_thread(
            self._client.get_item,
            TableName=self._table_name,
            Key={"id": {"S": order_id}},
        )
        item = result.get("Item")
        return _item_to_order(item) if item else None

    async def save(self, order: Order) -> None:
        await asyncio.to_thread(
            self._client.put_item,
            TableName=self._table_name,
            Item=_order_to_item(order),
        )

    async def scan_all(self) -> list[Order]:
        """Read every item, following LastEvaluatedKey until the table is exhausted.

        No page or size bound: memory grows with the table.
        """
        orders: list[Order] = []
        kwargs: dict[str, Any] = {"TableName": self._table_name}
        pages = 0
        while True:
            page = await asyncio.to_thread(self._client.scan, **kwargs)
            orders.extend(_item_to_order(item) for item in page.get("Items", []))
            pages += 1
            last_key = page.get("LastEvaluatedKey")
            if not last_key:
                break
            kwargs["ExclusiveStartKey"] = last_key
        logger.debug("Scanned %d orders in %d page(s)", len(orders), pages)
        return orders
