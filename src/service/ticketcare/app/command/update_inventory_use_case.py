from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.event.i_page_revalidator import IPageRevalidator
from src.platform.exception.exceptions import DomainError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.types.big_int_types import BigInt


class UpdateInventoryUseCase:
    def __init__(self, uow: AbstractUnitOfWork, page_revalidator: IPageRevalidator) -> None:
        self.uow = uow
        self.page_revalidator = page_revalidator

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
        page_revalidator: IPageRevalidator = Depends(Provide[Container.page_revalidator]),
    ) -> Self:
        return cls(uow=uow, page_revalidator=page_revalidator)

    @Logger.io
    async def update_inventory(self, *, inventory_id: BigInt, slug: str, quantity: int) -> None:
        if quantity < 0:
            raise DomainError('Quantity cannot be negative')

        async with self.uow:
            inventory = await self.uow.inventory_command_repo.get(inventory_id=inventory_id)
            if inventory is None:
                raise NotFoundError('Inventory not found')

            tickets_sold = await self.uow.inventory_command_repo.count_tickets_sold(
                inventory=inventory
            )
            if quantity < tickets_sold:
                raise DomainError(f'Cannot reduce inventory below tickets sold ({tickets_sold})')

            await self.uow.inventory_command_repo.update_quantity(
                inventory_id=inventory_id, quantity=quantity
            )
            await self.uow.commit()

        Logger.base.info(
            f'📦 [INVENTORY] Inventory {inventory_id}: {inventory.quantity} -> {quantity} '
            f'({tickets_sold} sold)'
        )
        await self.page_revalidator.revalidate(path=f'/events/{slug}')
