from datetime import datetime
from decimal import Decimal
from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from sqlalchemy.exc import SQLAlchemyError

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.event.i_page_revalidator import IPageRevalidator
from src.platform.exception.exceptions import NotFoundError, TicketTypeUpdateError
from src.platform.logging.loguru_io import Logger
from src.platform.types.big_int_types import BigInt
from src.service.ticketcare.domain.entity.ticket_type_entity import TicketTypeEntity


class UpdateTicketTypeUseCase:
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
    async def update_ticket_type(
        self,
        *,
        event_id: BigInt,
        ticket_type_id: BigInt,
        slug: str,
        name: str,
        price: Decimal,
        max_per_order: int,
        min_per_order: int,
        sale_start_time: datetime,
        sale_end_time: datetime,
        description: Optional[str] = None,
    ) -> TicketTypeEntity:
        """Scalar fields only; inventory rows are left as they are."""
        changes = TicketTypeEntity(
            id=ticket_type_id,
            event_id=event_id,
            name=name,
            description=description,
            price=price,
            max_per_order=max_per_order,
            min_per_order=min_per_order,
            sale_start_time=sale_start_time,
            sale_end_time=sale_end_time,
        )

        try:
            async with self.uow:
                existing = await self.uow.ticket_type_command_repo.get_for_event(
                    ticket_type_id=ticket_type_id, event_id=event_id
                )
                if existing is None:
                    raise NotFoundError(
                        'Ticket type not found or does not belong to this event'
                    )

                ticket_type = await self.uow.ticket_type_command_repo.update(ticket_type=changes)
                await self.uow.commit()
        except SQLAlchemyError as e:
            Logger.base.error(
                f'❌ [TICKET_TYPE] Update of {ticket_type_id} rolled back for event {event_id}: {e}'
            )
            raise TicketTypeUpdateError(str(getattr(e, 'orig', None) or e)) from e

        Logger.base.info(f'✅ [TICKET_TYPE] Updated ticket type {ticket_type_id}')
        await self.page_revalidator.revalidate(path=f'/events/{slug}')

        return ticket_type
