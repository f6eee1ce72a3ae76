"""OrderApplicationService — single-item reads/writes plus the full-table export.

There is no cache in front of the order table. Reads return the shared
LookupResult so the router maps them exactly like product/customer reads.
"""

import logging

from botocore.exceptions import BotoCoreError, ClientError
from pydantic_core import PydanticSerializationError

from src.sf_common.errors import ExportError, StoreWriteError
from src.sf_common.lookup import Found, LookupResult, NotFound, StoreError
from src.sf_order.application.schemas import encode_export
from src.sf_order.domain.models import ExportResult, Order
from src.sf_order.domain.repository import ExportStoreProtocol, OrderRepositoryProtocol

logger = logging.getLogger(__name__)

_AWS_ERRORS = (BotoCoreError, ClientError)


class OrderApplicationService:
    def __init__(
        self,
        repo: OrderRepositoryProtocol,
        export_store: ExportStoreProtocol | None,
        export_key: str = "orders_data.json",
        export_warn_items: int = 10_000,
    ) -> None:
        self._repo = repo
        self._export_store = export_store
        self._export_key = export_key
        self._export_warn_items = export_warn_items

    async def get(self, order_id: str) -> LookupResult[Order]:
        try:
            order = await self._repo.get_by_id(order_id)
        except _AWS_ERRORS as exc:
            logger.error("Failed to fetch order from DynamoDB for order id %s: %s", order_id, exc)
            return StoreError(order_id, exc)
        if order is None:
            return NotFound(order_id)
        return Found(order)

    async def create(self, order: Order) -> None:
        try:
            await self._repo.save(order)
        except _AWS_ERRORS as exc:
            logger.error("Failed to save order to DynamoDB for order id %s: %s", order.id, exc)
            raise StoreWriteError("failed to save order") from exc
        logger.info("Successfully saved order to DynamoDB for order id %s", order.id)

    async def export_to_object_store(self) -> ExportResult:
        """Scan → JSON → one object under the fixed export key (overwritten each call)."""
        try:
            orders = await self._repo.scan_all()
        except _AWS_ERRORS as exc:
            logger.error("Failed to fetch orders from DynamoDB: %s", exc)
            raise ExportError("failed to fetch orders") from exc

        if len(orders) > self._export_warn_items:
            # Export is unbounded; flag large tables instead of truncating.
            logger.warning(
                "Order export holds %d items (threshold %d); the whole table is held in memory",
                len(orders),
                self._export_warn_items,
            )

        try:
            body = encode_export(orders)
        except (PydanticSerializationError, ValueError) as exc:
            logger.error("Failed to marshal orders: %s", exc)
            raise ExportError("failed to marshal orders") from exc

        if self._export_store is None:
            logger.error("Failed to save data to S3: S3_ACCESS_POINT_ARN is not set")
            raise ExportError("failed to save data to S3")
        try:
            await self._export_store.put_object(self._export_key, body)
        except _AWS_ERRORS as exc:
            logger.error("Failed to save data to S3: %s", exc)
            raise ExportError("failed to save data to S3") from exc

        logger.info("Saved %d orders to S3 as %s (%d bytes)", len(orders), self._export_key, len(body))
        return ExportResult(self._export_key, len(orders), len(body))
