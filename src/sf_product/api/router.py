"""Product REST endpoints.

GET  /product?id=<id>  — cache-aside read
POST /product          — insert + best-effort cache fill
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
from src.sf_product.application.schemas import CreateProductRequest, ProductResponse
from src.sf_product.application.service import ProductApplicationService

router = APIRouter(prefix="/product", tags=["product"])

ServiceDep = Annotated[ProductApplicationService, Depends(get_service)]
DbDep = Annotated[AsyncSession, Depends(get_db_session)]


@router.get("", response_model=ProductResponse, responses=NOT_FOUND_RESPONSES)
async def get_product(
    response: Response,
    service: ServiceDep,
    db: DbDep,
    product_id: str = Query("", alias="id"),
) -> ProductResponse:
    found = found_or_raise(await service.get(db, product_id), "product")
    set_lookup_headers(response, found)
    return ProductResponse.from_domain(found.record)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=MessageResponse,
    responses=WRITE_RESPONSES,
)
async def create_product(
    body: CreateProductRequest,
    response: Response,
    service: ServiceDep,
    db: DbDep,
) -> MessageResponse:
    outcome = await service.create(db, body.to_domain())
    set_cache_fill_header(response, outcome.cache_fill)
    return message_response("Product created successfully")
