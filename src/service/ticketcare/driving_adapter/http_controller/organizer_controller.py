"""
Organizer write operations

Ticket types, inventory and time slots for one event. Every write signals
revalidation of the event's public page after it commits.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Header, status
from fastapi.responses import ORJSONResponse

from src.platform.logging.loguru_io import Logger
from src.platform.types.big_int_types import BigInt
from src.service.ticketcare.app.command.create_ticket_type_use_case import (
    CreateTicketTypeUseCase,
)
from src.service.ticketcare.app.command.create_time_slot_use_case import CreateTimeSlotUseCase
from src.service.ticketcare.app.command.remove_time_slot_use_case import RemoveTimeSlotUseCase
from src.service.ticketcare.app.command.update_inventory_use_case import UpdateInventoryUseCase
from src.service.ticketcare.app.command.update_ticket_type_use_case import (
    UpdateTicketTypeUseCase,
)
from src.service.ticketcare.app.query.list_inventory_use_case import ListInventoryUseCase
from src.service.ticketcare.driving_adapter.http_controller.cors import cors_json, preflight
from src.service.ticketcare.driving_adapter.http_controller.schema.organizer_schema import (
    InventoryUpdateRequest,
    TicketTypeCreateRequest,
    TicketTypeResponse,
    TicketTypeUpdateRequest,
    TimeSlotCreateRequest,
    TimeSlotResponse,
)


router = APIRouter()


# ============================ Ticket Types ============================


@router.post('/events/{event_id}/ticket-types', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_ticket_type(
    event_id: int,
    request: TicketTypeCreateRequest,
    origin: Optional[str] = Header(None),
    use_case: CreateTicketTypeUseCase = Depends(CreateTicketTypeUseCase.depends),
) -> ORJSONResponse:
    ticket_type = await use_case.create_ticket_type(
        event_id=BigInt(event_id),
        slug=request.slug,
        name=request.name,
        description=request.description,
        price=request.price,
        quantity=request.quantity,
        max_per_order=request.max_per_order,
        min_per_order=request.min_per_order,
        sale_start_time=request.sale_start_time,
        sale_end_time=request.sale_end_time,
        time_slot_ids=list(request.time_slot_ids),
    )

    return cors_json(
        {
            'success': True,
            'ticketType': TicketTypeResponse.model_validate(ticket_type).model_dump(by_alias=True),
        },
        origin=origin,
        status_code=status.HTTP_201_CREATED,
    )


@router.options('/events/{event_id}/ticket-types')
async def ticket_types_preflight(
    event_id: str, origin: Optional[str] = Header(None)
) -> ORJSONResponse:
    return preflight(origin)


@router.put('/events/{event_id}/ticket-types/{ticket_type_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def update_ticket_type(
    event_id: int,
    ticket_type_id: int,
    request: TicketTypeUpdateRequest,
    origin: Optional[str] = Header(None),
    use_case: UpdateTicketTypeUseCase = Depends(UpdateTicketTypeUseCase.depends),
) -> ORJSONResponse:
    ticket_type = await use_case.update_ticket_type(
        event_id=BigInt(event_id),
        ticket_type_id=BigInt(ticket_type_id),
        slug=request.slug,
        name=request.name,
        description=request.description,
        price=request.price,
        max_per_order=request.max_per_order,
        min_per_order=request.min_per_order,
        sale_start_time=request.sale_start_time,
        sale_end_time=request.sale_end_time,
    )

    return cors_json(
        {
            'success': True,
            'ticketType': TicketTypeResponse.model_validate(ticket_type).model_dump(by_alias=True),
        },
        origin=origin,
    )


@router.options('/events/{event_id}/ticket-types/{ticket_type_id}')
async def ticket_type_preflight(
    event_id: str, ticket_type_id: str, origin: Optional[str] = Header(None)
) -> ORJSONResponse:
    return preflight(origin)


# ============================ Inventory ============================


@router.get('/ticket-types/{ticket_type_id}/inventory', status_code=status.HTTP_200_OK)
@Logger.io
async def list_inventory(
    ticket_type_id: int,
    origin: Optional[str] = Header(None),
    use_case: ListInventoryUseCase = Depends(ListInventoryUseCase.depends),
) -> ORJSONResponse:
    inventory = await use_case.execute(ticket_type_id=BigInt(ticket_type_id))
    return cors_json({'success': True, 'data': inventory}, origin=origin)


@router.options('/ticket-types/{ticket_type_id}/inventory')
async def inventory_list_preflight(
    ticket_type_id: str, origin: Optional[str] = Header(None)
) -> ORJSONResponse:
    return preflight(origin)


@router.patch('/inventory/{inventory_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def update_inventory(
    inventory_id: int,
    request: InventoryUpdateRequest,
    origin: Optional[str] = Header(None),
    use_case: UpdateInventoryUseCase = Depends(UpdateInventoryUseCase.depends),
) -> ORJSONResponse:
    await use_case.update_inventory(
        inventory_id=BigInt(inventory_id), slug=request.slug, quantity=request.quantity
    )
    return cors_json({'success': True}, origin=origin)


@router.options('/inventory/{inventory_id}')
async def inventory_preflight(
    inventory_id: str, origin: Optional[str] = Header(None)
) -> ORJSONResponse:
    return preflight(origin)


# ============================ Time Slots ============================


@router.post('/event-dates/{event_date_id}/time-slots', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_time_slot(
    event_date_id: int,
    request: TimeSlotCreateRequest,
    origin: Optional[str] = Header(None),
    use_case: CreateTimeSlotUseCase = Depends(CreateTimeSlotUseCase.depends),
) -> ORJSONResponse:
    time_slot = await use_case.create_time_slot(
        event_date_id=BigInt(event_date_id),
        start_time=request.start_time,
        end_time=request.end_time,
        doors_open=request.doors_open,
    )

    return cors_json(
        {
            'success': True,
            'data': TimeSlotResponse.model_validate(time_slot).model_dump(by_alias=True),
        },
        origin=origin,
        status_code=status.HTTP_201_CREATED,
    )


@router.options('/event-dates/{event_date_id}/time-slots')
async def time_slots_preflight(
    event_date_id: str, origin: Optional[str] = Header(None)
) -> ORJSONResponse:
    return preflight(origin)


@router.delete('/time-slots/{time_slot_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def remove_time_slot(
    time_slot_id: int,
    origin: Optional[str] = Header(None),
    use_case: RemoveTimeSlotUseCase = Depends(RemoveTimeSlotUseCase.depends),
) -> ORJSONResponse:
    await use_case.remove_time_slot(time_slot_id=BigInt(time_slot_id))
    return cors_json({'success': True}, origin=origin)


@router.options('/time-slots/{time_slot_id}')
async def time_slot_preflight(
    time_slot_id: str, origin: Optional[str] = Header(None)
) -> ORJSONResponse:
    return preflight(origin)
