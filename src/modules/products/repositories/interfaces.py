"""Product repository interface.

The "Product Lookup" capability consumed by order creation: resolve a
product (and its current price) from an identifier.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product  # noqa: F401


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate.

    ``get_by_id`` (inherited) is the only look-up orders need; malformed
    identifiers must yield ``None`` rather than raise.
    """
