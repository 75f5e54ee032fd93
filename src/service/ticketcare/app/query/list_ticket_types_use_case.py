import time
from typing import Any, Dict, List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.ticketcare_metrics import metrics
from src.service.ticketcare.app.interface.i_catalog_query_repo import ICatalogQueryRepo
from src.service.ticketcare.domain.filter.filter_builder import build_ticket_type_query


class ListTicketTypesUseCase:
    def __init__(self, catalog_query_repo: ICatalogQueryRepo) -> None:
        self.catalog_query_repo = catalog_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        catalog_query_repo: ICatalogQueryRepo = Depends(Provide[Container.catalog_query_repo]),
    ) -> Self:
        return cls(catalog_query_repo=catalog_query_repo)

    @Logger.io
    async def execute(
        self, *, query: Optional[str] = None, event_id: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        """``event_id`` is raw; a value that is not a number lists every event's ticket types."""
        start = time.perf_counter()
        ticket_types = await self.catalog_query_repo.list_ticket_types(
            query=build_ticket_type_query(query=query, event_id=event_id)
        )
        metrics.observe_list_query(endpoint='ticket_types', duration=time.perf_counter() - start)
        return ticket_types
