"""Customer REST endpoints.

GET  /customer?id=<id>  — cache-aside read
POST /customer          — insert + best-effort cache fill
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.sf_common.app import get_service
from src.sf_common.database import get_db_session
from src.sf_common.lookup import found_or_raise
from src.sf_common.response import (
    NOT_FOUND_RESPONSES,
    WRITE_RESPONSES,
    MessageResponse,
    message_response,
    set_cache_fill_header,
    set_lookup_headers,
)
from src.sf_customer.application.schemas import CreateCustomerRequest, CustomerResponse
from src.sf_customer.application.service import CustomerApplicationService

router = APIRouter(prefix="/customer", tags=["customer"])

ServiceDep = Annotated[CustomerApplicationService, Depends(get_service)]
DbDep = Annotated[AsyncSession, Depends(get_db_session)]


@router.get("", response_model=CustomerResponse, responses=NOT_FOUND_RESPONSES)
async def get_customer(
    response: Response,
    service: ServiceDep,
    db: DbDep,
    customer_id: str = Query("", alias="id"),
) -> CustomerResponse:
    found = found_or_raise(await service.get(db, customer_id), "customer")
    set_lookup_headers(response, found)
    return CustomerResponse.from_domain(found.record)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=MessageResponse,
    responses=WRITE_RESPONSES,
)
async def create_customer(
    body: CreateCustomerRequest,
    response: Response,
    service: ServiceDep,
    db: DbDep,
) -> MessageResponse:
    outcome = await service.create(db, body.to_domain())
    set_cache_fill_header(response, outcome.cache_fill)
    return message_response("Customer created successfully")
