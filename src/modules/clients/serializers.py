"""Client DRF serializers (read-only)."""

from __future__ import annotations

from rest_framework import serializers

from modules.clients.models import Client


class ClientSerializer(serializers.ModelSerializer):
    class Meta:
        model = Client
        fields = [
            "id",
            "name",
            "document",
            "document_type",
            "email",
            "is_active",
            "created_at",
        ]
        read_only_fields = fields
