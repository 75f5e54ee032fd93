"""
Create Ticket Type Use Case

Provisions a ticket type and its inventory in one transaction:
- Insert the ticket type and flush so its id is visible
- Insert one inventory row per time slot, each with the full quantity
- Commit, or roll back everything when any insert fails

Time slot ids are not checked against the event; the foreign keys are the
only guard.
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from sqlalchemy.exc import SQLAlchemyError

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.event.i_page_revalidator import IPageRevalidator
from src.platform.exception.exceptions import TicketTypeProvisioningError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.ticketcare_metrics import metrics
from src.platform.types.big_int_types import BigInt
from src.service.ticketcare.domain.entity.ticket_type_entity import (
    TicketTypeDraft,
    TicketTypeEntity,
)


class CreateTicketTypeUseCase:
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
    async def create_ticket_type(
        self,
        *,
        event_id: BigInt,
        slug: str,
        name: str,
        price: Decimal,
        quantity: int,
        max_per_order: int,
        min_per_order: int,
        sale_start_time: datetime,
        sale_end_time: datetime,
        time_slot_ids: List[BigInt],
        description: Optional[str] = None,
    ) -> TicketTypeEntity:
        """
        Raises:
            DomainError: payload rejected before any database work
            TicketTypeProvisioningError: a database error; nothing was persisted
        """
        # 1. Validate the payload (domain)
        draft = TicketTypeDraft(
            ticket_type=TicketTypeEntity(
                event_id=event_id,
                name=name,
                description=description,
                price=price,
                max_per_order=max_per_order,
                min_per_order=min_per_order,
                sale_start_time=sale_start_time,
                sale_end_time=sale_end_time,
            ),
            quantity=quantity,
            time_slot_ids=time_slot_ids,
        )

        # 2. Ticket type + inventory, all or nothing
        try:
            async with self.uow:
                ticket_type = await self.uow.ticket_type_command_repo.create(
                    ticket_type=draft.ticket_type
                )
                inventories = await self.uow.inventory_command_repo.create_many(
                    ticket_type_id=ticket_type.id,
                    time_slot_ids=draft.time_slot_ids,
                    quantity=draft.quantity,
                )
                await self.uow.commit()
        except SQLAlchemyError as e:
            metrics.record_provisioning(success=False)
            Logger.base.error(
                f'❌ [TICKET_TYPE] Provisioning rolled back for event {event_id} ({slug}), '
                f'time slots {draft.time_slot_ids}: {e}'
            )
            raise TicketTypeProvisioningError(str(getattr(e, 'orig', None) or e)) from e

        metrics.record_provisioning(success=True, inventory_rows=len(inventories))
        Logger.base.info(
            f'✅ [TICKET_TYPE] Created ticket type {ticket_type.id} for event {event_id} '
            f'with {len(inventories)} inventory rows of {draft.quantity}'
        )

        # 3. Post-commit signal
        await self.page_revalidator.revalidate(path=f'/events/{slug}')

        return ticket_type
