"""Client API views.

Read-only: exposes the client look-up used by order creation so API
consumers can check a client before submitting an order.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.clients.exceptions import ClientNotFound, InactiveClient
from modules.clients.repositories.django_repository import ClientDjangoRepository
from modules.clients.serializers import ClientSerializer
from modules.clients.services import ClientService
from modules.core.exceptions import error_response


class ClientViewSet(ViewSet):
    """``GET /api/v1/clients/{identifier}/``"""

    lookup_value_regex = r"[^/]+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ClientService(repository=ClientDjangoRepository())

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        try:
            client = self._service.get_client_by_identifier(pk or "")
        except ClientNotFound:
            return error_response(
                "client_not_found", "Client not found.", status.HTTP_404_NOT_FOUND
            )
        except InactiveClient:
            return error_response(
                "client_inactive",
                "Client is inactive.",
                status.HTTP_422_UNPROCESSABLE_ENTITY,
            )
        return Response(ClientSerializer(client).data)
