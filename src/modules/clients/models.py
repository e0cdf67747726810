"""Client model.

Clients are identified externally by their CPF/CNPJ document, which is
stored digits-only.  Orders reference a client by that identifier.
Sensitive data (CPF/CNPJ) is masked in ``__str__``.
"""

from __future__ import annotations

import re

from django.db import models

from modules.core.models import BaseModel


class DocumentType(models.TextChoices):
    CPF = "CPF", "CPF"
    CNPJ = "CNPJ", "CNPJ"


def sanitize_document(value: str) -> str:
    """Strip all non-digit characters from a document string."""
    return re.sub(r"\D", "", value or "")


class Client(BaseModel):
    """Client aggregate root (read-only from the order workflow's view)."""

    name = models.CharField(max_length=255)
    document = models.CharField(max_length=14, unique=True)
    document_type = models.CharField(
        max_length=4,
        choices=DocumentType.choices,
        default=DocumentType.CPF,
    )
    email = models.EmailField(max_length=254, blank=True, default="")
    is_active = models.BooleanField(default=True)

    class Meta:
        db_table = "clients"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["is_active"], name="clients_active_idx"),
        ]

    def save(self, *args, **kwargs) -> None:
        if self.document:
            self.document = sanitize_document(self.document)
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        suffix = self.document[-4:] if self.document else "????"
        return f"{self.name} ({self.document_type}: ***{suffix})"
