"""
Catalog Query Repository Implementation - CQRS Read Side
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncContextManager, AsyncIterator, Callable, Dict, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from src.platform.logging.loguru_io import Logger
from src.platform.types.big_int_types import BigInt
from src.service.ticketcare.app.interface.i_catalog_query_repo import ICatalogQueryRepo
from src.service.ticketcare.domain.filter.query_filter import ListQuery
from src.service.ticketcare.driven_adapter.model.event_date_model import EventDateModel
from src.service.ticketcare.driven_adapter.model.event_model import EventModel
from src.service.ticketcare.driven_adapter.model.inventory_model import InventoryModel
from src.service.ticketcare.driven_adapter.model.ticket_type_model import TicketTypeModel
from src.service.ticketcare.driven_adapter.model.time_slot_model import TimeSlotModel
from src.service.ticketcare.driven_adapter.model.venue_model import VenueModel
from src.service.ticketcare.driven_adapter.repo.filter_translator import (
    apply_order_and_page,
    apply_where,
    build_select,
)


class CatalogQueryRepoImpl(ICatalogQueryRepo):
    def __init__(
        self, session_factory: Callable[..., AsyncContextManager[AsyncSession]] | None = None
    ) -> None:
        self.session_factory = session_factory
        self.session: AsyncSession | None = None

    @asynccontextmanager
    async def _get_session(self) -> AsyncIterator[AsyncSession]:
        if self.session is not None:
            yield self.session
        elif self.session_factory is not None:
            async with self.session_factory() as session:
                yield session
        else:
            raise RuntimeError('No session or session_factory available')

    async def _id_and_label(
        self, *, model: type, label: str, query: ListQuery
    ) -> List[Dict[str, Any]]:
        stmt = apply_where(select(model.id, getattr(model, label)), query, model)
        stmt = apply_order_and_page(stmt, query, model)
        async with self._get_session() as session:
            result = await session.execute(stmt)
            return [{'id': row[0], label: row[1]} for row in result.all()]

    @Logger.io
    async def list_events(self, *, query: ListQuery) -> List[Dict[str, Any]]:
        return await self._id_and_label(model=EventModel, label='title', query=query)

    @Logger.io
    async def list_venues(self, *, query: ListQuery) -> List[Dict[str, Any]]:
        return await self._id_and_label(model=VenueModel, label='name', query=query)

    @Logger.io
    async def list_ticket_types(self, *, query: ListQuery) -> List[Dict[str, Any]]:
        return await self._id_and_label(model=TicketTypeModel, label='name', query=query)

    @Logger.io
    async def list_time_slots(self, *, query: ListQuery) -> List[Dict[str, Any]]:
        stmt = build_select(TimeSlotModel, query).options(
            selectinload(TimeSlotModel.event_date).selectinload(EventDateModel.event)
        )
        async with self._get_session() as session:
            result = await session.execute(stmt)
            return [
                {
                    'id': slot.id,
                    'startTime': slot.start_time,
                    'endTime': slot.end_time,
                    'doorsOpen': slot.doors_open,
                    'eventDate': {
                        'id': slot.event_date.id,
                        'date': slot.event_date.date,
                        'event': {
                            'id': slot.event_date.event.id,
                            'title': slot.event_date.event.title,
                        },
                    },
                }
                for slot in result.scalars().all()
            ]

    @Logger.io
    async def list_inventory(self, *, ticket_type_id: BigInt) -> List[Dict[str, Any]]:
        stmt = (
            select(InventoryModel)
            .join(InventoryModel.time_slot)
            .where(InventoryModel.ticket_type_id == ticket_type_id)
            .order_by(TimeSlotModel.start_time.asc())
            .options(selectinload(InventoryModel.time_slot).selectinload(TimeSlotModel.event_date))
        )
        async with self._get_session() as session:
            result = await session.execute(stmt)
            return [
                {
                    'id': inventory.id,
                    'quantity': inventory.quantity,
                    'timeSlot': {
                        'id': inventory.time_slot.id,
                        'startTime': inventory.time_slot.start_time,
                        'endTime': inventory.time_slot.end_time,
                        'doorsOpen': inventory.time_slot.doors_open,
                        'eventDate': {'date': inventory.time_slot.event_date.date},
                    },
                }
                for inventory in result.scalars().all()
            ]
