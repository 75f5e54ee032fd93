import time
from typing import Any, Dict, List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.ticketcare_metrics import metrics
from src.service.ticketcare.app.interface.i_attendee_query_repo import IAttendeeQueryRepo
from src.service.ticketcare.domain.filter.filter_builder import (
    build_attendee_order_scope,
    build_customer_query,
)


class ListCustomersUseCase:
    def __init__(self, attendee_query_repo: IAttendeeQueryRepo) -> None:
        self.attendee_query_repo = attendee_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        attendee_query_repo: IAttendeeQueryRepo = Depends(Provide[Container.attendee_query_repo]),
    ) -> Self:
        return cls(attendee_query_repo=attendee_query_repo)

    @Logger.io
    async def execute(
        self,
        *,
        query: Optional[str] = None,
        event: Optional[str] = None,
        organizer_id: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """
        Customers holding at least one matching ticket.

        orderCount is limited to the organizer's orders when ``organizer_id``
        is given. The embedded orders list always holds every order.
        """
        start = time.perf_counter()
        customers = await self.attendee_query_repo.list_customers(
            query=build_customer_query(query=query, event=event, organizer_id=organizer_id),
            order_scope=build_attendee_order_scope(organizer_id=organizer_id),
        )
        metrics.observe_list_query(endpoint='customers', duration=time.perf_counter() - start)

        Logger.base.info(f'👥 [LIST_CUSTOMERS] Found {len(customers)} customers')
        return customers
