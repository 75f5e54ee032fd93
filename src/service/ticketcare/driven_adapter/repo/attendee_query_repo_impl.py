"""
Attendee Query Repository Implementation - CQRS Read Side

Customers and users who hold tickets, for the organizer's people views.

orderCount is limited by ``order_scope`` (one organizer's orders). The
embedded ``orders`` list is not: it always carries every order of the
person, which is what the dashboard's detail drawer shows.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncContextManager, AsyncIterator, Callable, Dict, List

from sqlalchemy import ColumnElement, Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import InstrumentedAttribute, selectinload

from src.platform.logging.loguru_io import Logger
from src.service.ticketcare.app.interface.i_attendee_query_repo import IAttendeeQueryRepo
from src.service.ticketcare.domain.filter.query_filter import ListQuery, Predicate
from src.service.ticketcare.driven_adapter.model.customer_model import CustomerModel
from src.service.ticketcare.driven_adapter.model.order_model import OrderModel
from src.service.ticketcare.driven_adapter.model.ticket_model import TicketModel
from src.service.ticketcare.driven_adapter.model.user_model import UserModel
from src.service.ticketcare.driven_adapter.repo.filter_translator import (
    apply_order_and_page,
    apply_where,
    to_clause,
)


class AttendeeQueryRepoImpl(IAttendeeQueryRepo):
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

    def _select_with_order_count(
        self,
        *,
        model: type,
        owner_column: InstrumentedAttribute[Any],
        orders: InstrumentedAttribute[Any],
        query: ListQuery,
        order_scope: Predicate,
    ) -> Select[Any]:
        scope_clause: ColumnElement[bool] = to_clause(order_scope, OrderModel)
        order_count = (
            select(func.count(OrderModel.id))
            .where(owner_column == model.id, scope_clause)
            .correlate(model)
            .scalar_subquery()
        )
        stmt = apply_where(select(model, order_count.label('order_count')), query, model)
        return apply_order_and_page(stmt, query, model).options(
            selectinload(orders).selectinload(OrderModel.tickets).selectinload(TicketModel.event),
            selectinload(orders)
            .selectinload(OrderModel.tickets)
            .selectinload(TicketModel.ticket_type),
        )

    def _orders_to_list(self, orders: List[OrderModel]) -> List[Dict[str, Any]]:
        return [
            {
                'id': order.id,
                'orderedAt': order.ordered_at,
                'tickets': [
                    {
                        'id': ticket.id,
                        'event': {'id': ticket.event.id, 'title': ticket.event.title},
                        'ticketType': {
                            'id': ticket.ticket_type.id,
                            'name': ticket.ticket_type.name,
                        },
                    }
                    for ticket in order.tickets
                ],
            }
            for order in orders
        ]

    def _customer_to_dict(self, customer: CustomerModel, order_count: int) -> Dict[str, Any]:
        return {
            'id': customer.id,
            'type': customer.type,
            'firstName': customer.first_name,
            'lastName': customer.last_name,
            'email': customer.email,
            'eventTypes': customer.event_types,
            'lastLogin': customer.last_login,
            'balance': customer.balance,
            'orderCount': order_count,
            'orders': self._orders_to_list(customer.orders),
        }

    def _user_to_dict(self, user: UserModel, order_count: int) -> Dict[str, Any]:
        return {
            'id': user.id,
            'firstName': user.first_name,
            'lastName': user.last_name,
            'email': user.email,
            'phone': user.phone,
            'orderCount': order_count,
            'orders': self._orders_to_list(user.orders),
        }

    @Logger.io
    async def list_customers(
        self, *, query: ListQuery, order_scope: Predicate
    ) -> List[Dict[str, Any]]:
        stmt = self._select_with_order_count(
            model=CustomerModel,
            owner_column=OrderModel.customer_id,
            orders=CustomerModel.orders,
            query=query,
            order_scope=order_scope,
        )
        async with self._get_session() as session:
            result = await session.execute(stmt)
            return [self._customer_to_dict(customer, count) for customer, count in result.all()]

    @Logger.io
    async def list_users(self, *, query: ListQuery, order_scope: Predicate) -> List[Dict[str, Any]]:
        stmt = self._select_with_order_count(
            model=UserModel,
            owner_column=OrderModel.user_id,
            orders=UserModel.orders,
            query=query,
            order_scope=order_scope,
        )
        async with self._get_session() as session:
            result = await session.execute(stmt)
            return [self._user_to_dict(user, count) for user, count in result.all()]
