"""Product domain exceptions."""

from __future__ import annotations


class ProductNotFound(Exception):
    """The requested product does not exist."""


class InactiveProduct(Exception):
    """The product exists but is inactive and cannot be sold."""
