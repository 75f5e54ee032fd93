from unittest.mock import AsyncMock, MagicMock

import pytest

from src.service.ticketcare.app.query.list_users_use_case import ListUsersUseCase
from src.service.ticketcare.domain.filter.filter_builder import build_attendee_order_scope


@pytest.fixture
def attendee_query_repo():
    repo = MagicMock()
    repo.list_users = AsyncMock(return_value=[{'id': 'usr_dan', 'orderCount': 1, 'orders': []}])
    return repo


@pytest.mark.unit
class TestListUsers:
    @pytest.mark.asyncio
    async def test_order_scope_follows_organizer(self, attendee_query_repo):
        use_case = ListUsersUseCase(attendee_query_repo=attendee_query_repo)

        result = await use_case.execute(organizer_id='org_1')

        assert result == [{'id': 'usr_dan', 'orderCount': 1, 'orders': []}]
        kwargs = attendee_query_repo.list_users.call_args.kwargs
        assert kwargs['order_scope'] == build_attendee_order_scope(organizer_id='org_1')

    @pytest.mark.asyncio
    async def test_no_organizer_counts_every_order(self, attendee_query_repo):
        use_case = ListUsersUseCase(attendee_query_repo=attendee_query_repo)

        await use_case.execute()

        kwargs = attendee_query_repo.list_users.call_args.kwargs
        assert kwargs['order_scope'] == build_attendee_order_scope()
