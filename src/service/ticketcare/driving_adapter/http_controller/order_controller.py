from typing import Optional

from fastapi import APIRouter, Depends, Header, Query, status
from fastapi.responses import ORJSONResponse

from src.platform.logging.loguru_io import Logger
from src.service.ticketcare.app.query.list_orders_use_case import ListOrdersUseCase
from src.service.ticketcare.driving_adapter.http_controller.cors import cors_json, preflight


router = APIRouter()


@router.get('', status_code=status.HTTP_200_OK)
@Logger.io
async def list_orders(
    page: Optional[str] = None,
    limit: Optional[str] = None,
    search: Optional[str] = None,
    organizer_id: Optional[str] = Query(None, alias='organizerId'),
    origin: Optional[str] = Header(None),
    use_case: ListOrdersUseCase = Depends(ListOrdersUseCase.depends),
) -> ORJSONResponse:
    """Newest first. ``page``/``limit`` that are not positive numbers fall back to 1/10."""
    order_page = await use_case.execute(
        page=page, limit=limit, search=search, organizer_id=organizer_id
    )
    return cors_json({'data': order_page.data, 'total': order_page.total}, origin=origin)


@router.options('')
async def orders_preflight(origin: Optional[str] = Header(None)) -> ORJSONResponse:
    return preflight(origin)
