"""Order repository interface.

The Service Layer depends exclusively on this contract (DIP).  Store
failures surface as ``modules.core.exceptions.RepositoryError``.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.orders.aggregates import NewOrder
    from modules.orders.models import Order


class IOrderRepository(IRepository["Order"]):
    """Repository contract for the Order aggregate root.

    The aggregate (Order + OrderItems) is written as one unit.
    """

    @abstractmethod
    def create(self, order: NewOrder) -> Order:
        """Persist ``order`` and its items atomically, keeping its identifier."""

    @abstractmethod
    def get_by_id(self, id: str) -> Optional[Order]:
        """Retrieve an order with its items, or ``None`` when unknown."""

    @abstractmethod
    def list_page(self, page: int, size: int) -> List[Order]:
        """Return one page (1-based) of orders, newest first."""
