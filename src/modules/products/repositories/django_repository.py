"""Django ORM implementation of the Product repository.

Error handling follows the Null Object pattern: methods return ``None``
instead of raising - the Service Layer decides how to translate a
missing entity into a domain error.
"""

from __future__ import annotations

from typing import Optional

from django.core.exceptions import ValidationError

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: str) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent or malformed IDs.
        """
        try:
            return Product.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

