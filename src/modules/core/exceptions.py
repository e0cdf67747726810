"""Shared exceptions and the standardized API error envelope.

Every error response produced by the API has the same shape::

    {
        "type": "validation_error" | "client_error" | "server_error",
        "errors": [{"code": "...", "detail": "...", "attr": "..." | None}]
    }

Framework errors (validation, authentication, throttling) get it from
``drf_standardized_errors`` (installed as DRF's ``EXCEPTION_HANDLER``);
views build domain-error responses in the same format through
``error_response``.
"""

from __future__ import annotations

from typing import Optional

from drf_standardized_errors.types import ErrorType
from rest_framework.response import Response


class RepositoryError(Exception):
    """A repository could not complete a read or write against its store."""


def error_response(
    code: str,
    detail: str,
    status_code: int,
    attr: Optional[str] = None,
) -> Response:
    """Build an envelope-shaped response for a domain error."""
    error_type = (
        ErrorType.SERVER_ERROR if status_code >= 500 else ErrorType.CLIENT_ERROR
    )
    return Response(
        {
            "type": error_type.value,
            "errors": [{"code": code, "detail": detail, "attr": attr}],
        },
        status=status_code,
    )
