"""
Catalog Query Repository Interface

Read side for the dashboard pickers: events, venues, ticket types,
time slots and a ticket type's inventory.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List

from src.platform.types.big_int_types import BigInt
from src.service.ticketcare.domain.filter.query_filter import ListQuery


class ICatalogQueryRepo(ABC):
    @abstractmethod
    async def list_events(self, *, query: ListQuery) -> List[Dict[str, Any]]:
        """Rows of {id, title}."""
        pass

    @abstractmethod
    async def list_venues(self, *, query: ListQuery) -> List[Dict[str, Any]]:
        """Rows of {id, name}."""
        pass

    @abstractmethod
    async def list_ticket_types(self, *, query: ListQuery) -> List[Dict[str, Any]]:
        """Rows of {id, name}."""
        pass

    @abstractmethod
    async def list_time_slots(self, *, query: ListQuery) -> List[Dict[str, Any]]:
        """Rows of {id, startTime, endTime, doorsOpen, eventDate: {id, date, event}}."""
        pass

    @abstractmethod
    async def list_inventory(self, *, ticket_type_id: BigInt) -> List[Dict[str, Any]]:
        """Inventory rows of one ticket type with their time slot, earliest slot first."""
        pass
