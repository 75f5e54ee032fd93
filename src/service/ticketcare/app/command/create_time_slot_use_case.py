from datetime import datetime
from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.event.i_page_revalidator import IPageRevalidator
from src.platform.exception.exceptions import ConflictError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.types.big_int_types import BigInt
from src.platform.types.utc_datetime import ensure_utc
from src.service.ticketcare.domain.entity.time_slot_entity import TimeSlotEntity


class CreateTimeSlotUseCase:
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
    async def create_time_slot(
        self,
        *,
        event_date_id: BigInt,
        start_time: datetime,
        end_time: datetime,
        doors_open: Optional[datetime] = None,
    ) -> TimeSlotEntity:
        """
        Raises:
            NotFoundError: the event date does not exist
            DomainError: end_time is not after start_time
            ConflictError: overlaps another slot on the same date
        """
        async with self.uow:
            slug = await self.uow.time_slot_command_repo.get_event_slug_for_date(
                event_date_id=event_date_id
            )
            if slug is None:
                raise NotFoundError('Event date not found')

            time_slot = TimeSlotEntity(
                event_date_id=event_date_id,
                start_time=ensure_utc(start_time),
                end_time=ensure_utc(end_time),
                doors_open=ensure_utc(doors_open),
            )

            existing = await self.uow.time_slot_command_repo.list_for_event_date(
                event_date_id=event_date_id
            )
            if any(time_slot.overlaps(slot) for slot in existing):
                raise ConflictError('Time slot conflicts with an existing time slot')

            created = await self.uow.time_slot_command_repo.create(time_slot=time_slot)
            await self.uow.commit()

        Logger.base.info(f'🕒 [TIME_SLOT] Created time slot {created.id} on date {event_date_id}')
        await self.page_revalidator.revalidate(path=f'/events/{slug}')

        return created
