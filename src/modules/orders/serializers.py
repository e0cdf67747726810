"""Order DRF serializers for API input/output.

The serializer operates at the Interface layer (API Views).
Business logic lives in the Service Layer, which receives
Pydantic DTOs from ``dtos.py``.
"""

from __future__ import annotations

from django.conf import settings
from rest_framework import serializers

from modules.orders.constants import (
    CLIENT_ID_MAX_LENGTH,
    MAX_QUANTITY,
    PRODUCT_ID_MAX_LENGTH,
    STATUS_MAX_LENGTH,
)
from modules.orders.models import Order, OrderItem

# ---------------------------------------------------------------------------
# Input Serializers
# ---------------------------------------------------------------------------


class CreateOrderItemSerializer(serializers.Serializer):
    """Validates a single item in an order creation request."""

    product_id = serializers.CharField(max_length=PRODUCT_ID_MAX_LENGTH)
    quantity = serializers.IntegerField(min_value=1, max_value=MAX_QUANTITY)


class CreateOrderSerializer(serializers.Serializer):
    """Validates the order creation request payload."""

    client_id = serializers.CharField(max_length=CLIENT_ID_MAX_LENGTH)
    status = serializers.CharField(max_length=STATUS_MAX_LENGTH)
    items = CreateOrderItemSerializer(many=True, allow_empty=False)

    def validate_status(self, value: str) -> str:
        allowed = list(settings.ORDER_STATUSES)
        if value not in allowed:
            raise serializers.ValidationError(
                f"Unsupported status '{value}'. Expected one of: {', '.join(allowed)}."
            )
        return value


# ---------------------------------------------------------------------------
# Output Serializers (Read)
# ---------------------------------------------------------------------------


class OrderItemSerializer(serializers.ModelSerializer):
    """Read serializer for order items with their price snapshot."""

    class Meta:
        model = OrderItem
        fields = [
            "product_id",
            "quantity",
            "unit_price",
            "line_total",
        ]
        read_only_fields = fields


class OrderSerializer(serializers.ModelSerializer):
    """Read serializer for orders with nested items (submission order)."""

    items = OrderItemSerializer(many=True, read_only=True)

    class Meta:
        model = Order
        fields = [
            "id",
            "client_id",
            "status",
            "total",
            "items",
            "created_at",
        ]
        read_only_fields = fields
