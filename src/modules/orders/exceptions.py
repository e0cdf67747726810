"""Order domain exceptions.

Raised by the Service Layer; each wraps its underlying cause
(``raise ... from exc``) so callers can log it or map it to a
transport-specific status.  The API layer (Views) catches these and
translates them into HTTP responses.
"""

from __future__ import annotations


class OrderError(Exception):
    """Base class for order workflow errors."""


class ClientValidationFailed(OrderError):
    """The requesting client could not be resolved (missing, inactive, lookup error)."""

    def __init__(self, client_id: str) -> None:
        self.client_id = client_id
        super().__init__(f"client validation failed for client {client_id}")


class ProductValidationFailed(OrderError):
    """A requested product could not be resolved.  ``product_id`` names it."""

    def __init__(self, product_id: str) -> None:
        self.product_id = product_id
        super().__init__(f"product validation failed for {product_id}")


class OrderConstructionFailed(OrderError):
    """The Order aggregate rejected the assembled data."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"failed to create order instance: {reason}")


class PersistenceFailed(OrderError):
    """The repository could not store the order; it was not created."""

    def __init__(self, order_id: str) -> None:
        self.order_id = order_id
        super().__init__(f"failed to save order {order_id}")


class InvalidIdentifierFormat(OrderError):
    """The order identifier is not a well-formed UUID."""

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(f"invalid identifier format: {identifier!r}")


class OrderNotFound(OrderError):
    """The requested order does not exist."""
