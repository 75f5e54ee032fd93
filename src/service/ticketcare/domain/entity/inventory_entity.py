from typing import Optional

import attrs

from src.platform.types.big_int_types import BigInt


@attrs.define
class InventoryEntity:
    ticket_type_id: BigInt
    time_slot_id: BigInt
    quantity: int
    id: Optional[BigInt] = None
