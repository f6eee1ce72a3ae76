# src/sf_order/api/router.py
"""Order REST endpoints.

GET  /order?id=<id>  — single item
POST /order          — put item
POST /s3/order       — export the whole table to S3
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from src.sf_common.app import get_service
from src.sf_common.lookup import found_or_raise
from src.sf_common.response import (
    NOT_FOUND_RESPONSES,
    WRITE_RESPONSES,
    ErrorResponse,
    MessageResponse,
    message_response,
)
from src.sf_order.application.schemas import CreateOrderRequest, OrderResponse
from src.sf_order.application.service import OrderApplicationService

router = APIRouter(prefix="/order", tags=["order"])
export_router = APIRouter(prefix="/s3/order", tags=["order"])

ServiceDep = Annotated[OrderApplicationService, Depends(get_service)]


@router.get("", response_model=OrderResponse, responses=NOT_FOUND_RESPONSES)
async def get_order(
    service: ServiceDep,
    order_id: str = Query("", alias="id"),
) -> OrderResponse:
    found = found_or_raise(await service.get(order_id), "order", "failed to fetch order")
    return OrderResponse.from_domain(found.record)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=MessageResponse,
    responses=WRITE_RESPONSES,
)
async def create_order(body: CreateOrderRequest, service: ServiceDep) -> MessageResponse:
    await service.create(body.to_domain())
    return message_response("Order created successfully")


@export_router.post("", response_model=MessageResponse, responses={500: {"model": ErrorResponse}})
async def save_orders_to_s3(service: ServiceDep) -> MessageResponse:
    await service.export_to_object_store()
    return message_response("Orders saved to S3 successfully")
