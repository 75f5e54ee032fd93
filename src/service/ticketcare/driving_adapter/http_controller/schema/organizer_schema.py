from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.platform.types.big_int_types import BigIntStr


_CAMEL = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TicketTypeUpdateRequest(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            'example': {
                'slug': 'summer-fest-2025',
                'name': 'VIP',
                'description': 'Front row and lounge access',
                'price': '149.90',
                'maxPerOrder': 4,
                'minPerOrder': 1,
                'saleStartTime': '2025-06-01T00:00:00.000Z',
                'saleEndTime': '2025-07-15T18:00:00.000Z',
            }
        },
    )

    slug: str = Field(min_length=1)
    name: str
    description: Optional[str] = None
    price: Decimal
    max_per_order: int
    min_per_order: int = 1
    sale_start_time: datetime
    sale_end_time: datetime


class TicketTypeCreateRequest(TicketTypeUpdateRequest):
    quantity: int
    time_slot_ids: List[BigIntStr] = Field(default_factory=list)


class TicketTypeResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: BigIntStr
    event_id: BigIntStr
    name: str
    description: Optional[str]
    price: Decimal
    max_per_order: int
    min_per_order: int
    sale_start_time: datetime
    sale_end_time: datetime
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class InventoryUpdateRequest(BaseModel):
    model_config = _CAMEL

    slug: str = Field(min_length=1)
    quantity: int


class TimeSlotCreateRequest(BaseModel):
    model_config = _CAMEL

    start_time: datetime
    end_time: datetime
    doors_open: Optional[datetime] = None


class TimeSlotResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: BigIntStr
    event_date_id: BigIntStr
    start_time: datetime
    end_time: datetime
    doors_open: Optional[datetime]
