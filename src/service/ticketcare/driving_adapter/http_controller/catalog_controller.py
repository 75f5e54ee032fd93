"""
Catalog lookups for the dashboard autocompletes

GET /api/events, /api/venues, /api/ticket-types and /api/events/time-slots.
Each answers ``{data: [...]}`` and its own OPTIONS preflight.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Header, Query, status
from fastapi.responses import ORJSONResponse

from src.platform.logging.loguru_io import Logger
from src.service.ticketcare.app.query.list_events_use_case import ListEventsUseCase
from src.service.ticketcare.app.query.list_ticket_types_use_case import ListTicketTypesUseCase
from src.service.ticketcare.app.query.list_time_slots_use_case import ListTimeSlotsUseCase
from src.service.ticketcare.app.query.list_venues_use_case import ListVenuesUseCase
from src.service.ticketcare.driving_adapter.http_controller.cors import cors_json, preflight


router = APIRouter()


@router.get('/events', status_code=status.HTTP_200_OK)
@Logger.io
async def list_events(
    query: Optional[str] = None,
    origin: Optional[str] = Header(None),
    use_case: ListEventsUseCase = Depends(ListEventsUseCase.depends),
) -> ORJSONResponse:
    events = await use_case.execute(query=query)
    return cors_json({'data': events}, origin=origin)


@router.options('/events')
async def events_preflight(origin: Optional[str] = Header(None)) -> ORJSONResponse:
    return preflight(origin)


@router.get('/events/time-slots', status_code=status.HTTP_200_OK)
@Logger.io
async def list_time_slots(
    event_id: Optional[str] = Query(None, alias='eventId'),
    origin: Optional[str] = Header(None),
    use_case: ListTimeSlotsUseCase = Depends(ListTimeSlotsUseCase.depends),
) -> ORJSONResponse:
    time_slots = await use_case.execute(event_id=event_id)
    return cors_json({'data': time_slots}, origin=origin)


@router.options('/events/time-slots')
async def time_slots_preflight(origin: Optional[str] = Header(None)) -> ORJSONResponse:
    return preflight(origin)


@router.get('/venues', status_code=status.HTTP_200_OK)
@Logger.io
async def list_venues(
    query: Optional[str] = None,
    origin: Optional[str] = Header(None),
    use_case: ListVenuesUseCase = Depends(ListVenuesUseCase.depends),
) -> ORJSONResponse:
    venues = await use_case.execute(query=query)
    return cors_json({'data': venues}, origin=origin)


@router.options('/venues')
async def venues_preflight(origin: Optional[str] = Header(None)) -> ORJSONResponse:
    return preflight(origin)


@router.get('/ticket-types', status_code=status.HTTP_200_OK)
@Logger.io
async def list_ticket_types(
    query: Optional[str] = None,
    event_id: Optional[str] = Query(None, alias='eventId'),
    origin: Optional[str] = Header(None),
    use_case: ListTicketTypesUseCase = Depends(ListTicketTypesUseCase.depends),
) -> ORJSONResponse:
    ticket_types = await use_case.execute(query=query, event_id=event_id)
    return cors_json({'data': ticket_types}, origin=origin)


@router.options('/ticket-types')
async def ticket_types_preflight(origin: Optional[str] = Header(None)) -> ORJSONResponse:
    return preflight(origin)
