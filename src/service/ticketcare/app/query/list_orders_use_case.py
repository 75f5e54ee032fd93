"""
List Orders Use Case

The page and the total are separate queries on separate sessions, run in one
anyio task group. Either failing cancels the other and the error propagates.
"""

import time
from typing import Any, Dict, List, Optional, Self

import anyio
from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.ticketcare_metrics import metrics
from src.service.ticketcare.app.dto.order_page import OrderPage
from src.service.ticketcare.app.interface.i_order_query_repo import IOrderQueryRepo
from src.service.ticketcare.domain.filter.filter_builder import build_order_query


class ListOrdersUseCase:
    def __init__(self, order_query_repo: IOrderQueryRepo) -> None:
        self.order_query_repo = order_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        order_query_repo: IOrderQueryRepo = Depends(Provide[Container.order_query_repo]),
    ) -> Self:
        return cls(order_query_repo=order_query_repo)

    @Logger.io
    async def execute(
        self,
        *,
        page: Optional[str] = None,
        limit: Optional[str] = None,
        search: Optional[str] = None,
        organizer_id: Optional[str] = None,
    ) -> OrderPage:
        query = build_order_query(page=page, limit=limit, search=search, organizer_id=organizer_id)
        rows: List[Dict[str, Any]] = []
        total = 0

        async def load_rows() -> None:
            nonlocal rows
            rows = await self.order_query_repo.list_orders(query=query)

        async def load_total() -> None:
            nonlocal total
            total = await self.order_query_repo.count_orders(query=query)

        start = time.perf_counter()
        async with anyio.create_task_group() as tg:
            tg.start_soon(load_rows)
            tg.start_soon(load_total)
        metrics.observe_list_query(endpoint='orders', duration=time.perf_counter() - start)

        Logger.base.info(f'🧾 [LIST_ORDERS] {len(rows)} orders on page, {total} in total')
        return OrderPage(data=rows, total=total)
