"""Client service layer: the read contract consumed by order creation."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from modules.clients.exceptions import ClientNotFound, InactiveClient

if TYPE_CHECKING:
    from modules.clients.models import Client
    from modules.clients.repositories.interfaces import IClientRepository

logger = structlog.get_logger(__name__)


class ClientService:
    """Application service for client look-ups.

    Receives an ``IClientRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IClientRepository) -> None:
        self._repo = repository

    def get_client_by_identifier(self, identifier: str) -> Client:
        """Retrieve an active client by CPF/CNPJ.

        Raises:
            ClientNotFound: no client is registered under ``identifier``.
            InactiveClient: the client exists but is inactive.
        """
        client = self._repo.get_by_identifier(identifier)
        if not client:
            logger.info("client.not_found", client_id=identifier)
            raise ClientNotFound(f"Client {identifier} not found.")
        if not client.is_active:
            logger.info("client.inactive", client_id=identifier)
            raise InactiveClient(f"Client {identifier} is inactive.")
        return client
