"""Django ORM implementation of the Client repository.

Look-ups follow the Null Object pattern: missing clients yield ``None``
and the Service Layer decides how to report them.
"""

from __future__ import annotations

from typing import Optional

from django.core.exceptions import ValidationError

from modules.clients.models import Client, sanitize_document
from modules.clients.repositories.interfaces import IClientRepository


class ClientDjangoRepository(IClientRepository):
    """Concrete Client repository backed by Django ORM."""

    def get_by_id(self, id: str) -> Optional[Client]:
        """Retrieve a client by primary key; ``None`` for unknown or invalid IDs."""
        try:
            return Client.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def get_by_identifier(self, identifier: str) -> Optional[Client]:
        document = sanitize_document(identifier)
        if not document:
            return None
        return Client.objects.filter(document=document).first()
