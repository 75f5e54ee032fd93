"""
Unit of Work Pattern - one session, one transaction, many repositories

Architecture:
- UoW opens the session from the injected session factory on enter
- UoW owns commit/rollback; repositories only flush
- Command repositories are bound to the UoW's shared session
- Leaving the block without commit() rolls everything back
"""

from __future__ import annotations

import abc
from contextlib import AsyncExitStack
from typing import TYPE_CHECKING, AsyncContextManager, Callable

from sqlalchemy.ext.asyncio import AsyncSession


if TYPE_CHECKING:
    from src.service.ticketcare.app.interface.i_inventory_command_repo import (
        IInventoryCommandRepo,
    )
    from src.service.ticketcare.app.interface.i_ticket_type_command_repo import (
        ITicketTypeCommandRepo,
    )
    from src.service.ticketcare.app.interface.i_time_slot_command_repo import (
        ITimeSlotCommandRepo,
    )


class AbstractUnitOfWork(abc.ABC):
    """
    Abstract Unit of Work for TicketCare writes

    Usage:
        async with uow:
            ticket_type = await uow.ticket_type_command_repo.create(ticket_type=...)
            await uow.inventory_command_repo.create_many(...)
            await uow.commit()
    """

    ticket_type_command_repo: ITicketTypeCommandRepo
    inventory_command_repo: IInventoryCommandRepo
    time_slot_command_repo: ITimeSlotCommandRepo

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        """Commit the transaction"""
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """
    SQLAlchemy implementation of Unit of Work

    Built per use-case call by the DI container (``Container.unit_of_work``)
    with ``Database.session`` as its session factory.
    """

    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory
        self._exit_stack: AsyncExitStack | None = None

    async def __aenter__(self):
        from src.service.ticketcare.driven_adapter.repo.inventory_command_repo_impl import (
            InventoryCommandRepoImpl,
        )
        from src.service.ticketcare.driven_adapter.repo.ticket_type_command_repo_impl import (
            TicketTypeCommandRepoImpl,
        )
        from src.service.ticketcare.driven_adapter.repo.time_slot_command_repo_impl import (
            TimeSlotCommandRepoImpl,
        )

        self._exit_stack = AsyncExitStack()
        self.session = await self._exit_stack.enter_async_context(self.session_factory())

        # Repositories share the UoW session
        self.ticket_type_command_repo = TicketTypeCommandRepoImpl(session=self.session)
        self.inventory_command_repo = InventoryCommandRepoImpl(session=self.session)
        self.time_slot_command_repo = TimeSlotCommandRepoImpl(session=self.session)

        return await super().__aenter__()

    async def __aexit__(self, *args):
        try:
            await super().__aexit__(*args)
        finally:
            if self._exit_stack is not None:
                await self._exit_stack.aclose()
                self._exit_stack = None

    async def _commit(self):
        await self.session.commit()

    async def rollback(self) -> None:
        await self.session.rollback()
