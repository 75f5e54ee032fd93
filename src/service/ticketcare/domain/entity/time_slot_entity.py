from datetime import datetime
from typing import Optional

import attrs

from src.platform.exception.exceptions import DomainError
from src.platform.types.big_int_types import BigInt


@attrs.define
class TimeSlotEntity:
    event_date_id: BigInt
    start_time: datetime
    end_time: datetime
    doors_open: Optional[datetime] = None
    id: Optional[BigInt] = None

    def __attrs_post_init__(self) -> None:
        if self.doors_open is None:
            self.doors_open = self.start_time
        if self.end_time <= self.start_time:
            raise DomainError('End time must be after start time')

    def overlaps(self, other: 'TimeSlotEntity') -> bool:
        return self.start_time < other.end_time and self.end_time > other.start_time
