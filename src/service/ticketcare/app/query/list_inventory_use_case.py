from typing import Any, Dict, List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.platform.types.big_int_types import BigInt
from src.service.ticketcare.app.interface.i_catalog_query_repo import ICatalogQueryRepo


class ListInventoryUseCase:
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
    async def execute(self, *, ticket_type_id: BigInt) -> List[Dict[str, Any]]:
        """Inventory rows of one ticket type with their time slots, earliest slot first."""
        Logger.base.info(f'📦 [INVENTORY] Loading inventory for ticket type {ticket_type_id}')
        return await self.catalog_query_repo.list_inventory(ticket_type_id=ticket_type_id)
