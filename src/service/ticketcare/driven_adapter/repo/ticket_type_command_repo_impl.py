from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.types.big_int_types import BigInt
from src.platform.types.utc_datetime import ensure_utc
from src.service.ticketcare.app.interface.i_ticket_type_command_repo import (
    ITicketTypeCommandRepo,
)
from src.service.ticketcare.domain.entity.ticket_type_entity import TicketTypeEntity
from src.service.ticketcare.driven_adapter.model.ticket_type_model import TicketTypeModel


class TicketTypeCommandRepoImpl(ITicketTypeCommandRepo):
    def __init__(self, *, session: AsyncSession):
        self.session = session

    @Logger.io
    async def create(self, *, ticket_type: TicketTypeEntity) -> TicketTypeEntity:
        ticket_type_model = TicketTypeModel(
            event_id=ticket_type.event_id,
            name=ticket_type.name,
            description=ticket_type.description,
            price=ticket_type.price,
            max_per_order=ticket_type.max_per_order,
            min_per_order=ticket_type.min_per_order,
            sale_start_time=ticket_type.sale_start_time,
            sale_end_time=ticket_type.sale_end_time,
        )

        self.session.add(ticket_type_model)
        await self.session.flush()
        await self.session.refresh(ticket_type_model)

        return self._model_to_entity(ticket_type_model)

    @Logger.io
    async def get_for_event(
        self, *, ticket_type_id: BigInt, event_id: BigInt
    ) -> Optional[TicketTypeEntity]:
        result = await self.session.execute(
            select(TicketTypeModel).where(
                TicketTypeModel.id == ticket_type_id,
                TicketTypeModel.event_id == event_id,
            )
        )
        ticket_type_model = result.scalar_one_or_none()
        return self._model_to_entity(ticket_type_model) if ticket_type_model else None

    @Logger.io
    async def update(self, *, ticket_type: TicketTypeEntity) -> TicketTypeEntity:
        ticket_type_model = await self.session.get(TicketTypeModel, ticket_type.id)
        if ticket_type_model is None:
            raise NotFoundError('Ticket type not found or does not belong to this event')

        ticket_type_model.name = ticket_type.name
        ticket_type_model.description = ticket_type.description
        ticket_type_model.price = ticket_type.price
        ticket_type_model.max_per_order = ticket_type.max_per_order
        ticket_type_model.min_per_order = ticket_type.min_per_order
        ticket_type_model.sale_start_time = ticket_type.sale_start_time
        ticket_type_model.sale_end_time = ticket_type.sale_end_time

        await self.session.flush()
        await self.session.refresh(ticket_type_model)

        return self._model_to_entity(ticket_type_model)

    def _model_to_entity(self, ticket_type_model: TicketTypeModel) -> TicketTypeEntity:
        return TicketTypeEntity(
            id=BigInt(ticket_type_model.id),
            event_id=BigInt(ticket_type_model.event_id),
            name=ticket_type_model.name,
            description=ticket_type_model.description,
            price=ticket_type_model.price,
            max_per_order=ticket_type_model.max_per_order,
            min_per_order=ticket_type_model.min_per_order,
            sale_start_time=ensure_utc(ticket_type_model.sale_start_time),
            sale_end_time=ensure_utc(ticket_type_model.sale_end_time),
            created_at=ensure_utc(ticket_type_model.created_at),
            updated_at=ensure_utc(ticket_type_model.updated_at),
        )
