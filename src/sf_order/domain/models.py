"""Order domain model — pure dataclass, no boto3 dependency."""
from dataclasses import dataclass


@dataclass
class Order:
    id: str
    customer_id: str  # wire name: customerid
    product_id: str  # wire name: productid


@dataclass(frozen=True)
class ExportResult:
    """Outcome of one full-table export."""

    object_key: str
    order_count: int
    size_bytes: int
