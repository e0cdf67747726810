"""Client domain exceptions."""

from __future__ import annotations


class ClientNotFound(Exception):
    """No client is registered under the given identifier."""


class InactiveClient(Exception):
    """The client exists but is inactive and cannot place orders."""
