from abc import ABC, abstractmethod
from typing import List, Optional

from src.platform.types.big_int_types import BigInt
from src.service.ticketcare.domain.entity.inventory_entity import InventoryEntity


class IInventoryCommandRepo(ABC):
    @abstractmethod
    async def create_many(
        self, *, ticket_type_id: BigInt, time_slot_ids: List[BigInt], quantity: int
    ) -> List[InventoryEntity]:
        """One row per time slot, each with the full ``quantity``."""
        pass

    @abstractmethod
    async def get(self, *, inventory_id: BigInt) -> Optional[InventoryEntity]:
        pass

    @abstractmethod
    async def count_tickets_sold(self, *, inventory: InventoryEntity) -> int:
        """Tickets issued for the inventory's (ticket type, time slot) pair."""
        pass

    @abstractmethod
    async def update_quantity(self, *, inventory_id: BigInt, quantity: int) -> None:
        pass
