"""Pydantic schemas for the order API and the S3 export.

Wire field names are lower-case without separators (customerid, productid);
Python attributes use snake_case via aliases.

Export document: compact JSON array of order objects ordered by id, so the
same table contents always produce the same bytes. Empty table → b"[]".
"""

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from src.sf_order.domain.models import Order


class CreateOrderRequest(BaseModel):
    """Missing or null fields bind as ""; non-string values are rejected."""

    model_config = ConfigDict(strict=True)

    id: str = ""
    customer_id: str = Field("", alias="customerid")
    product_id: str = Field("", alias="productid")

    @field_validator("id", "customer_id", "product_id", mode="before")
    @classmethod
    def _null_as_empty(cls, value: object) -> object:
        return "" if value is None else value

    def to_domain(self) -> Order:
        return Order(id=self.id, customer_id=self.customer_id, product_id=self.product_id)


class OrderResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    customer_id: str = Field(alias="customerid")
    product_id: str = Field(alias="productid")

    @classmethod
    def from_domain(cls, order: Order) -> "OrderResponse":
        return cls(id=order.id, customer_id=order.customer_id, product_id=order.product_id)


_EXPORT_ADAPTER = TypeAdapter(list[OrderResponse])


def encode_export(orders: list[Order]) -> bytes:
    ordered = sorted(orders, key=lambda o: o.id)
    return _EXPORT_ADAPTER.dump_json(
        [OrderResponse.from_domain(o) for o in ordered], by_alias=True
    )
