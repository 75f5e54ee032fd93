from abc import ABC, abstractmethod
from typing import List, Optional

from src.platform.types.big_int_types import BigInt
from src.service.ticketcare.domain.entity.time_slot_entity import TimeSlotEntity


class ITimeSlotCommandRepo(ABC):
    @abstractmethod
    async def get_event_slug_for_date(self, *, event_date_id: BigInt) -> Optional[str]:
        """Slug of the event owning the date, None when the date does not exist."""
        pass

    @abstractmethod
    async def get_event_slug_for_slot(self, *, time_slot_id: BigInt) -> Optional[str]:
        """Slug of the event owning the slot, None when the slot does not exist."""
        pass

    @abstractmethod
    async def list_for_event_date(self, *, event_date_id: BigInt) -> List[TimeSlotEntity]:
        pass

    @abstractmethod
    async def create(self, *, time_slot: TimeSlotEntity) -> TimeSlotEntity:
        pass

    @abstractmethod
    async def delete(self, *, time_slot_id: BigInt) -> None:
        pass
