"""Order API views.

Exposes the ``OrderService`` via HTTP using a DRF ViewSet.
Domain exceptions are caught and translated into envelope-shaped error
responses; anything unexpected propagates to Django.
"""

from __future__ import annotations

import structlog
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.throttling import BaseThrottle
from rest_framework.viewsets import ViewSet

from modules.core.exceptions import RepositoryError, error_response
from modules.orders.dtos import CreateOrderDTO, CreateOrderItemDTO
from modules.orders.exceptions import (
    ClientValidationFailed,
    InvalidIdentifierFormat,
    OrderConstructionFailed,
    OrderNotFound,
    PersistenceFailed,
    ProductValidationFailed,
)
from modules.orders.factories import build_order_service
from modules.orders.pagination import normalize_page, parse_int_param
from modules.orders.serializers import CreateOrderSerializer, OrderSerializer

logger = structlog.get_logger(__name__)


class OrderViewSet(ViewSet):
    """ViewSet for Order operations.

    ``POST /api/v1/orders/``, ``GET /api/v1/orders/`` and
    ``GET /api/v1/orders/{id}/``.  All ORM access goes through the
    service/repository layer.
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = build_order_service()

    def get_throttles(self) -> list[BaseThrottle]:
        """Scope throttling per action."""
        throttle_scope: str | None
        if self.action == "create":
            throttle_scope = "order_creation"
        elif self.action in {"list", "retrieve"}:
            throttle_scope = "order_listing"
        else:
            throttle_scope = None
        self.throttle_scope = throttle_scope
        return super().get_throttles()

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/orders/"""
        create_serializer = CreateOrderSerializer(data=request.data)
        create_serializer.is_valid(raise_exception=True)

        data = create_serializer.validated_data
        try:
            dto = CreateOrderDTO(
                client_id=data["client_id"],
                status=data["status"],
                items=[
                    CreateOrderItemDTO(
                        product_id=item["product_id"],
                        quantity=item["quantity"],
                    )
                    for item in data["items"]
                ],
            )
        except PydanticValidationError as exc:
            return error_response(
                "invalid",
                exc.errors()[0]["msg"],
                status.HTTP_400_BAD_REQUEST,
            )

        try:
            order = self._service.create_order(dto)
        except ClientValidationFailed as exc:
            return error_response(
                "client_validation_failed",
                str(exc),
                status.HTTP_422_UNPROCESSABLE_ENTITY,
                attr="client_id",
            )
        except ProductValidationFailed as exc:
            return error_response(
                "product_validation_failed",
                str(exc),
                status.HTTP_422_UNPROCESSABLE_ENTITY,
                attr="items",
            )
        except OrderConstructionFailed as exc:
            return error_response(
                "order_construction_failed",
                str(exc),
                status.HTTP_400_BAD_REQUEST,
            )
        except PersistenceFailed as exc:
            return error_response(
                "order_persistence_failed",
                str(exc),
                status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return Response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/v1/orders/?page=<n>&page_size=<n>

        Missing, non-numeric or non-positive values are normalised,
        never rejected.
        """
        page_request = normalize_page(
            parse_int_param(request.query_params.get("page")),
            parse_int_param(request.query_params.get("page_size")),
        )
        try:
            orders = self._service.get_orders(page_request.page, page_request.size)
        except RepositoryError:
            logger.exception("order.list_unavailable")
            return error_response(
                "repository_unavailable",
                "Failed to retrieve orders.",
                status.HTTP_503_SERVICE_UNAVAILABLE,
            )

        return Response(
            {
                "page": page_request.page,
                "page_size": page_request.size,
                "results": OrderSerializer(orders, many=True).data,
            }
        )

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/orders/{pk}/"""
        try:
            order = self._service.get_order_by_id(pk or "")
        except InvalidIdentifierFormat:
            return error_response(
                "invalid_identifier",
                "Invalid order ID format.",
                status.HTTP_400_BAD_REQUEST,
            )
        except OrderNotFound:
            return error_response(
                "order_not_found", "Order not found.", status.HTTP_404_NOT_FOUND
            )
        except RepositoryError:
            logger.exception("order.read_unavailable", order_id=pk)
            return error_response(
                "repository_unavailable",
                "Failed to retrieve order.",
                status.HTTP_503_SERVICE_UNAVAILABLE,
            )
        return Response(OrderSerializer(order).data)
