"""Product API views (read-only product look-up)."""

from __future__ import annotations

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.core.exceptions import error_response
from modules.products.exceptions import InactiveProduct, ProductNotFound
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductSerializer
from modules.products.services import ProductService


class ProductViewSet(ViewSet):
    """``GET /api/v1/products/{id}/``"""

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        try:
            product = self._service.get_product_by_identifier(pk or "")
        except ProductNotFound:
            return error_response(
                "product_not_found", "Product not found.", status.HTTP_404_NOT_FOUND
            )
        except InactiveProduct:
            return error_response(
                "product_inactive",
                "Product is inactive.",
                status.HTTP_422_UNPROCESSABLE_ENTITY,
            )
        return Response(ProductSerializer(product).data)
