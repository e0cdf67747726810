"""Product service layer: the read contract consumed by order creation."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from modules.products.exceptions import InactiveProduct, ProductNotFound

if TYPE_CHECKING:
    from modules.products.models import Product
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for product look-ups.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    def get_product_by_identifier(self, id: str) -> Product:
        """Retrieve a sellable product by ID.

        Raises:
            ProductNotFound: the product does not exist.
            InactiveProduct: the product is inactive.
        """
        product = self._repo.get_by_id(id)
        if not product:
            logger.info("product.not_found", product_id=str(id))
            raise ProductNotFound(f"Product {id} not found.")
        if not product.is_active:
            logger.info("product.inactive", product_id=str(id))
            raise InactiveProduct(f"Product {id} is inactive.")
        return product
