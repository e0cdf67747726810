"""In-memory Order aggregate built by the order-creation workflow.

``NewOrder`` is the fully validated, immutable order handed to the
repository for persistence.  Line totals are captured once, when the
line is priced, and stored as plain values: nothing recomputes them
from the product catalog afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Sequence, Tuple
from uuid import UUID

import uuid6

from modules.orders.constants import MONEY_LIMIT, ZERO


class InvalidOrder(ValueError):
    """Order data violates a structural invariant of the aggregate."""


@dataclass(frozen=True)
class NewOrderLine:
    """A priced order line.  ``line_total`` is a snapshot, not a property."""

    product_id: str
    quantity: int
    unit_price: Decimal
    line_total: Decimal

    @classmethod
    def priced(cls, product_id: str, quantity: int, unit_price: Decimal) -> NewOrderLine:
        """Price a line at ``unit_price`` (the product's price right now)."""
        return cls(
            product_id=product_id,
            quantity=quantity,
            unit_price=unit_price,
            line_total=unit_price * quantity,
        )


@dataclass(frozen=True)
class NewOrder:
    """Order aggregate root, validated on construction.

    Invariants:
    - at least one line item;
    - every quantity is a positive integer and every price non-negative;
    - every ``line_total`` equals ``unit_price * quantity``;
    - ``total`` equals the sum of the line totals;
    - every amount fits the money columns it is stored in.
    """

    id: UUID
    client_id: str
    status: str
    items: Tuple[NewOrderLine, ...]
    total: Decimal

    def __post_init__(self) -> None:
        if not self.client_id or not self.client_id.strip():
            raise InvalidOrder("Order must reference a client.")
        if not self.status or not self.status.strip():
            raise InvalidOrder("Order status must not be blank.")
        if not self.items:
            raise InvalidOrder("Order must contain at least one item.")

        for line in self.items:
            if line.quantity < 1:
                raise InvalidOrder(
                    f"Quantity for product {line.product_id} must be at least 1."
                )
            if line.unit_price < 0:
                raise InvalidOrder(
                    f"Price for product {line.product_id} cannot be negative."
                )
            if line.line_total != line.unit_price * line.quantity:
                raise InvalidOrder(
                    f"Line total for product {line.product_id} does not match "
                    f"unit price x quantity."
                )
            if abs(line.line_total) >= MONEY_LIMIT:
                raise InvalidOrder(
                    f"Line total for product {line.product_id} exceeds the "
                    f"maximum storable amount."
                )

        expected = sum((line.line_total for line in self.items), ZERO)
        if self.total != expected:
            raise InvalidOrder(
                f"Order total {self.total} does not match the sum of its "
                f"line totals ({expected})."
            )
        if abs(self.total) >= MONEY_LIMIT:
            raise InvalidOrder(
                f"Order total {self.total} exceeds the maximum storable amount."
            )

    @classmethod
    def create(
        cls,
        client_id: str,
        items: Sequence[NewOrderLine],
        status: str,
        total: Decimal,
    ) -> NewOrder:
        """Build a new order with a fresh, time-ordered UUIDv7 identifier.

        Raises:
            InvalidOrder: any invariant is violated.
        """
        return cls(
            id=uuid6.uuid7(),
            client_id=client_id,
            status=status,
            items=tuple(items),
            total=total,
        )
