"""Order DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF Serializers)
and the Service layer.  DTOs are immutable (``frozen=True``).

- ``CreateOrderItemDTO``: one requested line (product + quantity).
- ``CreateOrderDTO``: order creation request (client, status, lines).
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, field_validator

from modules.orders.constants import MAX_QUANTITY


class CreateOrderItemDTO(BaseModel):
    """Immutable DTO for a single order line in a creation request.

    The caller sends ``product_id`` and ``quantity``; the unit price is
    resolved by the Service Layer from the product catalog.
    """

    model_config = ConfigDict(frozen=True)

    product_id: str
    quantity: int

    @field_validator("product_id")
    @classmethod
    def product_id_must_not_be_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Product ID must not be blank.")
        return v

    @field_validator("quantity")
    @classmethod
    def quantity_must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Quantity must be at least 1.")
        if v > MAX_QUANTITY:
            raise ValueError(f"Quantity must be at most {MAX_QUANTITY}.")
        return v


class CreateOrderDTO(BaseModel):
    """Immutable DTO for order creation requests.

    Validates:
    - ``items`` must contain at least one line (empty orders are rejected
      here, before any collaborator is called).
    - ``client_id`` and ``status`` must not be blank.
    """

    model_config = ConfigDict(frozen=True)

    client_id: str
    status: str
    items: List[CreateOrderItemDTO]

    @field_validator("client_id", "status")
    @classmethod
    def must_not_be_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Value must not be blank.")
        return v

    @field_validator("items")
    @classmethod
    def items_must_not_be_empty(
        cls, v: List[CreateOrderItemDTO]
    ) -> List[CreateOrderItemDTO]:
        if not v:
            raise ValueError("Order must have at least one item.")
        return v
