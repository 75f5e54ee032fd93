from datetime import datetime, timezone
from decimal import Decimal

import pytest
from sqlalchemy.exc import OperationalError

from src.platform.exception.exceptions import (
    DomainError,
    NotFoundError,
    TicketTypeUpdateError,
)
from src.platform.types.big_int_types import BigInt
from src.service.ticketcare.app.command.update_ticket_type_use_case import (
    UpdateTicketTypeUseCase,
)
from src.service.ticketcare.domain.entity.ticket_type_entity import TicketTypeEntity


@pytest.fixture
def use_case(uow, page_revalidator):
    return UpdateTicketTypeUseCase(uow=uow, page_revalidator=page_revalidator)


@pytest.fixture
def changes(sale_window):
    start, end = sale_window
    return {
        'event_id': BigInt(1),
        'ticket_type_id': BigInt(7),
        'slug': 'summer-fest',
        'name': 'VIP (late)',
        'price': Decimal('179.00'),
        'max_per_order': 2,
        'min_per_order': 1,
        'sale_start_time': start,
        'sale_end_time': end,
    }


def _entity(changes) -> TicketTypeEntity:
    return TicketTypeEntity(
        id=changes['ticket_type_id'],
        event_id=changes['event_id'],
        name=changes['name'],
        price=changes['price'],
        max_per_order=changes['max_per_order'],
        min_per_order=changes['min_per_order'],
        sale_start_time=changes['sale_start_time'],
        sale_end_time=changes['sale_end_time'],
    )


@pytest.mark.unit
class TestUpdateTicketType:
    @pytest.mark.asyncio
    async def test_updates_when_ticket_type_belongs_to_event(
        self, use_case, uow, page_revalidator, changes
    ):
        # Given
        uow.ticket_type_command_repo.get_for_event.return_value = _entity(changes)
        uow.ticket_type_command_repo.update.return_value = _entity(changes)

        # When
        result = await use_case.update_ticket_type(**changes)

        # Then
        uow.ticket_type_command_repo.get_for_event.assert_awaited_once_with(
            ticket_type_id=BigInt(7), event_id=BigInt(1)
        )
        updated = uow.ticket_type_command_repo.update.call_args.kwargs['ticket_type']
        assert updated.id == 7
        assert updated.name == 'VIP (late)'
        assert result.price == Decimal('179.00')
        uow.commit.assert_awaited_once()
        page_revalidator.revalidate.assert_awaited_once_with(path='/events/summer-fest')

    @pytest.mark.asyncio
    async def test_ticket_type_of_another_event_is_not_found(
        self, use_case, uow, page_revalidator, changes
    ):
        # Given: the id exists but under a different event
        uow.ticket_type_command_repo.get_for_event.return_value = None

        # When / Then
        with pytest.raises(
            NotFoundError, match='Ticket type not found or does not belong to this event'
        ):
            await use_case.update_ticket_type(**changes)

        uow.ticket_type_command_repo.update.assert_not_awaited()
        uow.commit.assert_not_awaited()
        page_revalidator.revalidate.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_database_error_becomes_update_error(self, use_case, uow, changes):
        uow.ticket_type_command_repo.get_for_event.return_value = _entity(changes)
        uow.ticket_type_command_repo.update.side_effect = OperationalError(
            'UPDATE ticket_type ...', {}, Exception('database is locked')
        )

        with pytest.raises(TicketTypeUpdateError, match='database is locked'):
            await use_case.update_ticket_type(**changes)

        uow.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_invalid_limits_rejected_before_lookup(self, use_case, uow, changes):
        changes['min_per_order'] = 3

        with pytest.raises(DomainError):
            await use_case.update_ticket_type(**changes)

        uow.ticket_type_command_repo.get_for_event.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_naive_sale_end_compares_with_aware_start(self, use_case, uow, changes):
        changes['sale_end_time'] = datetime(2025, 5, 1)

        with pytest.raises(DomainError, match='Sale start time must be before'):
            await use_case.update_ticket_type(**changes)

        uow.ticket_type_command_repo.get_for_event.assert_not_awaited()
