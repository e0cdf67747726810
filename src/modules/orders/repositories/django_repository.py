"""Django ORM implementation of the Order repository.

Satisfies ``IOrderRepository`` using Django's QuerySet API.  The write
path runs inside ``transaction.atomic()`` so an order is stored with all
of its items or not at all.  Database errors, and stored amounts that
cannot be decoded, are re-raised as ``RepositoryError`` with the
original exception chained.
"""

from __future__ import annotations

from decimal import InvalidOperation
from typing import List, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import DatabaseError, transaction

from modules.core.exceptions import RepositoryError
from modules.orders.aggregates import NewOrder
from modules.orders.models import Order, OrderItem
from modules.orders.pagination import PageRequest
from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


class OrderDjangoRepository(IOrderRepository):
    """Concrete Order repository backed by Django ORM."""

    # ------------------------------------------------------------------
    # Create (aggregate root + children)
    # ------------------------------------------------------------------

    def create(self, order: NewOrder) -> Order:
        log = logger.bind(order_id=str(order.id), item_count=len(order.items))
        try:
            with transaction.atomic():
                row = Order.objects.create(
                    id=order.id,
                    client_id=order.client_id,
                    status=order.status,
                    total=order.total,
                )
                OrderItem.objects.bulk_create(
                    [
                        OrderItem(
                            order=row,
                            product_id=line.product_id,
                            position=position,
                            quantity=line.quantity,
                            unit_price=line.unit_price,
                            line_total=line.line_total,
                        )
                        for position, line in enumerate(order.items)
                    ]
                )
                # Loaded inside the transaction so an unreadable row is
                # rolled back with it.
                saved = self._with_items().get(id=row.id)
        except (DatabaseError, InvalidOperation) as exc:
            log.error("order.persist_failed", error=str(exc))
            raise RepositoryError(f"Could not persist order {order.id}.") from exc

        log.info("order.persisted")
        return saved

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def get_by_id(self, id: str) -> Optional[Order]:
        """Retrieve an order with prefetched items.

        Returns ``None`` for non-existent or invalid IDs.
        """
        try:
            return self._with_items().filter(id=id).first()
        except (ValueError, ValidationError):
            return None
        except (DatabaseError, InvalidOperation) as exc:
            logger.error("order.read_failed", order_id=str(id), error=str(exc))
            raise RepositoryError(f"Could not read order {id}.") from exc

    def list_page(self, page: int, size: int) -> List[Order]:
        offset = PageRequest(page, size).offset
        try:
            return list(self._with_items()[offset : offset + size])
        except (DatabaseError, InvalidOperation) as exc:
            logger.error("order.list_failed", page=page, size=size, error=str(exc))
            raise RepositoryError("Could not list orders.") from exc

    @staticmethod
    def _with_items():
        return Order.objects.prefetch_related("items").order_by("-created_at", "-id")
