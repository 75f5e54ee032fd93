import time
from typing import Any, Dict, List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.ticketcare_metrics import metrics
from src.service.ticketcare.app.interface.i_catalog_query_repo import ICatalogQueryRepo
from src.service.ticketcare.domain.filter.filter_builder import build_venue_query


class ListVenuesUseCase:
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
    async def execute(self, *, query: Optional[str] = None) -> List[Dict[str, Any]]:
        start = time.perf_counter()
        venues = await self.catalog_query_repo.list_venues(query=build_venue_query(query=query))
        metrics.observe_list_query(endpoint='venues', duration=time.perf_counter() - start)
        return venues
