"""Order listing page DTO."""

from typing import Any, Dict, List

import attrs


@attrs.define(frozen=True)
class OrderPage:
    """
    One page of orders plus the total matching the same filter.

    data and total come from separate queries run concurrently, so they may
    disagree by a few rows when orders are written in between.
    """

    data: List[Dict[str, Any]]
    total: int
