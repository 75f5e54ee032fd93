from datetime import datetime
from decimal import Decimal
from typing import List, Optional

import attrs

from src.platform.exception.exceptions import DomainError
from src.platform.types.big_int_types import BigInt
from src.platform.types.utc_datetime import ensure_utc


def _validate_non_empty_string(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not value or not value.strip():
        raise DomainError(f'Ticket type {attribute.name} cannot be empty')


def _validate_non_negative_price(
    instance: object, attribute: attrs.Attribute, value: Decimal
) -> None:
    if value < 0:
        raise DomainError('Ticket type price cannot be negative')


@attrs.define
class TicketTypeEntity:
    event_id: BigInt
    name: str = attrs.field(validator=_validate_non_empty_string)
    price: Decimal = attrs.field(converter=Decimal, validator=_validate_non_negative_price)
    max_per_order: int
    min_per_order: int
    sale_start_time: datetime = attrs.field(converter=ensure_utc)
    sale_end_time: datetime = attrs.field(converter=ensure_utc)
    description: Optional[str] = None
    id: Optional[BigInt] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __attrs_post_init__(self) -> None:
        validate_order_limits(min_per_order=self.min_per_order, max_per_order=self.max_per_order)
        validate_sale_window(start=self.sale_start_time, end=self.sale_end_time)


@attrs.define
class TicketTypeDraft:
    """Scalar fields of a new ticket type plus the time slots it is sold in."""

    ticket_type: TicketTypeEntity
    quantity: int
    time_slot_ids: List[BigInt] = attrs.field(factory=list)

    def __attrs_post_init__(self) -> None:
        if self.quantity < 0:
            raise DomainError('Quantity cannot be negative')


def validate_order_limits(*, min_per_order: int, max_per_order: int) -> None:
    if min_per_order < 1 or max_per_order < 1:
        raise DomainError('Order limits must be positive')
    if min_per_order > max_per_order:
        raise DomainError('Minimum per order cannot exceed maximum per order')


def validate_sale_window(*, start: datetime, end: datetime) -> None:
    if start >= end:
        raise DomainError('Sale start time must be before sale end time')
