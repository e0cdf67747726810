"""Narrow capability interfaces consumed by ``OrderService``.

``ClientService`` and ``ProductService`` satisfy these structurally;
tests inject plain stubs.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Protocol


class PricedProduct(Protocol):
    price: Decimal


class ClientLookup(Protocol):
    def get_client_by_identifier(self, identifier: str) -> Any:
        """Return the client or raise when it cannot be resolved."""
        ...


class ProductLookup(Protocol):
    def get_product_by_identifier(self, id: str) -> PricedProduct:
        """Return the product (with its current price) or raise."""
        ...
