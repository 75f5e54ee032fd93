from unittest.mock import AsyncMock, MagicMock

import pytest

from src.service.ticketcare.app.query.list_orders_use_case import ListOrdersUseCase
from src.service.ticketcare.domain.filter.query_filter import Page


@pytest.fixture
def order_query_repo():
    repo = MagicMock()
    repo.list_orders = AsyncMock(return_value=[{'id': '15'}, {'id': '14'}])
    repo.count_orders = AsyncMock(return_value=25)
    return repo


@pytest.mark.unit
class TestListOrders:
    @pytest.mark.asyncio
    async def test_returns_page_and_total(self, order_query_repo):
        use_case = ListOrdersUseCase(order_query_repo=order_query_repo)

        result = await use_case.execute(page='2', limit='10')

        assert result.data == [{'id': '15'}, {'id': '14'}]
        assert result.total == 25
        query = order_query_repo.list_orders.call_args.kwargs['query']
        assert query.page == Page(offset=10, limit=10)
        order_query_repo.count_orders.assert_awaited_once_with(query=query)

    @pytest.mark.asyncio
    async def test_garbage_paging_falls_back_to_defaults(self, order_query_repo):
        use_case = ListOrdersUseCase(order_query_repo=order_query_repo)

        await use_case.execute(page='abc', limit='-3')

        query = order_query_repo.list_orders.call_args.kwargs['query']
        assert query.page == Page(offset=0, limit=10)

    @pytest.mark.asyncio
    async def test_count_failure_propagates(self, order_query_repo):
        order_query_repo.count_orders.side_effect = RuntimeError('connection reset')
        use_case = ListOrdersUseCase(order_query_repo=order_query_repo)

        with pytest.raises(Exception) as exc:
            await use_case.execute()

        assert 'connection reset' in repr(exc.value)
