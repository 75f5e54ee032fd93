from abc import ABC, abstractmethod
from typing import Optional

from src.platform.types.big_int_types import BigInt
from src.service.ticketcare.domain.entity.ticket_type_entity import TicketTypeEntity


class ITicketTypeCommandRepo(ABC):
    """Writes run on the unit of work's session; the caller commits."""

    @abstractmethod
    async def create(self, *, ticket_type: TicketTypeEntity) -> TicketTypeEntity:
        """Insert and flush so the returned entity carries its generated id."""
        pass

    @abstractmethod
    async def get_for_event(
        self, *, ticket_type_id: BigInt, event_id: BigInt
    ) -> Optional[TicketTypeEntity]:
        """The ticket type only if it belongs to ``event_id``."""
        pass

    @abstractmethod
    async def update(self, *, ticket_type: TicketTypeEntity) -> TicketTypeEntity:
        pass
