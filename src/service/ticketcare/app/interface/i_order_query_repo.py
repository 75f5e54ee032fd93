from abc import ABC, abstractmethod
from typing import Any, Dict, List

from src.service.ticketcare.domain.filter.query_filter import ListQuery


class IOrderQueryRepo(ABC):
    @abstractmethod
    async def list_orders(self, *, query: ListQuery) -> List[Dict[str, Any]]:
        """One page of orders with customer first name and ticket details."""
        pass

    @abstractmethod
    async def count_orders(self, *, query: ListQuery) -> int:
        """Total orders matching ``query.where``; order and page are ignored."""
        pass
