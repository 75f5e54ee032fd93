from typing import Optional

from fastapi import APIRouter, Depends, Header, Query, status
from fastapi.responses import ORJSONResponse

from src.platform.logging.loguru_io import Logger
from src.service.ticketcare.app.query.list_customers_use_case import ListCustomersUseCase
from src.service.ticketcare.app.query.list_users_use_case import ListUsersUseCase
from src.service.ticketcare.driving_adapter.http_controller.cors import cors_json, preflight


router = APIRouter()


@router.get('/customers', status_code=status.HTTP_200_OK)
@Logger.io
async def list_customers(
    query: Optional[str] = None,
    event: Optional[str] = None,
    organizer_id: Optional[str] = Query(None, alias='organizerId'),
    origin: Optional[str] = Header(None),
    use_case: ListCustomersUseCase = Depends(ListCustomersUseCase.depends),
) -> ORJSONResponse:
    customers = await use_case.execute(query=query, event=event, organizer_id=organizer_id)
    return cors_json({'data': customers}, origin=origin)


@router.options('/customers')
async def customers_preflight(origin: Optional[str] = Header(None)) -> ORJSONResponse:
    return preflight(origin)


@router.get('/users', status_code=status.HTTP_200_OK)
@Logger.io
async def list_users(
    query: Optional[str] = None,
    event: Optional[str] = None,
    organizer_id: Optional[str] = Query(None, alias='organizerId'),
    origin: Optional[str] = Header(None),
    use_case: ListUsersUseCase = Depends(ListUsersUseCase.depends),
) -> ORJSONResponse:
    users = await use_case.execute(query=query, event=event, organizer_id=organizer_id)
    return cors_json({'data': users}, origin=origin)


@router.options('/users')
async def users_preflight(origin: Optional[str] = Header(None)) -> ORJSONResponse:
    return preflight(origin)
