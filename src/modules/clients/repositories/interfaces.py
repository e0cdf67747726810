"""Client repository interface.

The order workflow only needs to read clients; this contract is the
"Client Lookup" capability injected into ``OrderService`` (via
``ClientService``).
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.clients.models import Client


class IClientRepository(IRepository["Client"]):
    """Repository contract for the Client aggregate."""

    @abstractmethod
    def get_by_identifier(self, identifier: str) -> Optional[Client]:
        """Retrieve a client by its CPF/CNPJ document (any formatting)."""
