"""
Order Query Repository Implementation - CQRS Read Side

Page and count are separate calls, each on its own session, so the caller
can run them concurrently.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncContextManager, AsyncIterator, Callable, Dict, List

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from src.platform.logging.loguru_io import Logger
from src.service.ticketcare.app.interface.i_order_query_repo import IOrderQueryRepo
from src.service.ticketcare.domain.filter.query_filter import ListQuery
from src.service.ticketcare.driven_adapter.model.event_model import EventModel
from src.service.ticketcare.driven_adapter.model.order_model import OrderModel
from src.service.ticketcare.driven_adapter.model.ticket_model import TicketModel
from src.service.ticketcare.driven_adapter.repo.filter_translator import build_count, build_select


class OrderQueryRepoImpl(IOrderQueryRepo):
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

    def _order_to_dict(self, order: OrderModel) -> Dict[str, Any]:
        return {
            'id': order.id,
            'status': order.status,
            'paymentMethod': order.payment_method,
            'orderedAt': order.ordered_at,
            'totalAmount': order.total_amount,
            'customer': {'firstName': order.customer.first_name} if order.customer else None,
            'tickets': [
                {
                    'id': ticket.id,
                    'eventId': ticket.event_id,
                    'event': {
                        'title': ticket.event.title,
                        'startTime': ticket.event.start_time,
                        'venue': {'name': ticket.event.venue.name} if ticket.event.venue else None,
                    },
                    'ticketType': {'name': ticket.ticket_type.name},
                }
                for ticket in order.tickets
            ],
        }

    @Logger.io
    async def list_orders(self, *, query: ListQuery) -> List[Dict[str, Any]]:
        stmt = build_select(OrderModel, query).options(
            selectinload(OrderModel.customer),
            selectinload(OrderModel.tickets)
            .selectinload(TicketModel.event)
            .selectinload(EventModel.venue),
            selectinload(OrderModel.tickets).selectinload(TicketModel.ticket_type),
        )
        async with self._get_session() as session:
            result = await session.execute(stmt)
            return [self._order_to_dict(order) for order in result.scalars().all()]

    @Logger.io
    async def count_orders(self, *, query: ListQuery) -> int:
        async with self._get_session() as session:
            result = await session.execute(build_count(OrderModel, query))
            return result.scalar_one()
