from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.event.i_page_revalidator import IPageRevalidator
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.types.big_int_types import BigInt


class RemoveTimeSlotUseCase:
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
    async def remove_time_slot(self, *, time_slot_id: BigInt) -> None:
        """Inventory rows of the slot go with it; tickets keep a null slot."""
        async with self.uow:
            slug = await self.uow.time_slot_command_repo.get_event_slug_for_slot(
                time_slot_id=time_slot_id
            )
            if slug is None:
                raise NotFoundError('Time slot does not exist, please refresh the page')

            await self.uow.time_slot_command_repo.delete(time_slot_id=time_slot_id)
            await self.uow.commit()

        Logger.base.info(f'🗑️ [TIME_SLOT] Removed time slot {time_slot_id}')
        await self.page_revalidator.revalidate(path=f'/events/{slug}')
