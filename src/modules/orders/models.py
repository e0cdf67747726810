"""Order and OrderItem models.

- An Order is written once, together with its items, and never mutated
  through this service (no update/cancel workflow lives here).
- ``client_id`` stores the client identifier exactly as supplied at
  creation; it is not re-validated afterwards.
- OrderItem snapshots the product price at creation time
  (``unit_price``) and stores ``line_total`` as given: it is **not**
  recalculated on save, so later price changes never alter history.
"""

from __future__ import annotations

from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import BaseModel
from modules.orders.constants import (
    CLIENT_ID_MAX_LENGTH,
    MONEY_DECIMAL_PLACES,
    MONEY_MAX_DIGITS,
    STATUS_MAX_LENGTH,
)


class Order(BaseModel):
    """Order aggregate root (persisted form of ``NewOrder``)."""

    client_id: models.CharField = models.CharField(
        max_length=CLIENT_ID_MAX_LENGTH,
        db_index=True,
    )
    status: models.CharField = models.CharField(max_length=STATUS_MAX_LENGTH)
    total: models.DecimalField = models.DecimalField(
        max_digits=MONEY_MAX_DIGITS,
        decimal_places=MONEY_DECIMAL_PLACES,
        default=Decimal("0.00"),
    )

    class Meta:
        db_table = "orders"
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["status"], name="orders_status_idx"),
            models.Index(fields=["-created_at"], name="orders_created_idx"),
        ]

    def __str__(self) -> str:
        return f"Order {self.id} ({self.status})"


class OrderItem(BaseModel):
    """Line item linking an Order to a Product.

    ``position`` keeps the order in which the caller submitted the lines.
    """

    order: models.ForeignKey = models.ForeignKey(
        "orders.Order",
        on_delete=models.CASCADE,
        related_name="items",
    )
    product: models.ForeignKey = models.ForeignKey(
        "products.Product",
        on_delete=models.PROTECT,
        related_name="order_items",
    )
    position: models.PositiveIntegerField = models.PositiveIntegerField()
    quantity: models.PositiveIntegerField = models.PositiveIntegerField(
        validators=[MinValueValidator(1)],
    )
    unit_price: models.DecimalField = models.DecimalField(
        max_digits=10,
        decimal_places=2,
    )
    line_total: models.DecimalField = models.DecimalField(
        max_digits=MONEY_MAX_DIGITS,
        decimal_places=MONEY_DECIMAL_PLACES,
    )

    class Meta:
        db_table = "order_items"
        ordering = ["position"]
        constraints = [
            models.CheckConstraint(
                check=models.Q(quantity__gte=1),
                name="order_items_quantity_positive",
            ),
            models.UniqueConstraint(
                fields=["order", "position"],
                name="order_items_order_position_uniq",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.product_id} x{self.quantity} ({self.line_total})"
