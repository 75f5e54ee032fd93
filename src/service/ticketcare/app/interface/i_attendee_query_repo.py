from abc import ABC, abstractmethod
from typing import Any, Dict, List

from src.service.ticketcare.domain.filter.query_filter import ListQuery, Predicate


class IAttendeeQueryRepo(ABC):
    """Customers and users who hold tickets"""

    @abstractmethod
    async def list_customers(
        self, *, query: ListQuery, order_scope: Predicate
    ) -> List[Dict[str, Any]]:
        """
        Customers matching ``query`` with all of their orders.

        ``order_scope`` selects which orders count toward ``orderCount``.
        """
        pass

    @abstractmethod
    async def list_users(self, *, query: ListQuery, order_scope: Predicate) -> List[Dict[str, Any]]:
        """Users matching ``query``; same orderCount rule as ``list_customers``."""
        pass
