"""structlog processors shared by the project's logging configuration.

``config.settings`` installs them in the processor chain used by both
structlog loggers and stdlib ``logging`` records.
"""

from __future__ import annotations

import re
from typing import Any, MutableMapping

MASK = "***MASKED***"

DOCUMENT_PATTERN = re.compile(
    r"\b\d{2}\.?\d{3}\.?\d{3}/?\d{4}-?\d{2}\b"  # CNPJ
    r"|\b\d{3}\.?\d{3}\.?\d{3}-?\d{2}\b"  # CPF
)
EMAIL_PATTERN = re.compile(r"[\w.+-]+@[\w-]+(\.[\w-]+)+")
CREDENTIAL_PATTERN = re.compile(
    r"(password|passwd|secret|token|authorization)"
    r"""([=:]\s*["']?)([^\s,}"']+)""",
    re.IGNORECASE,
)


def mask_value(value: str) -> str:
    value = DOCUMENT_PATTERN.sub(MASK, value)
    value = EMAIL_PATTERN.sub(MASK, value)
    return CREDENTIAL_PATTERN.sub(lambda m: f"{m.group(1)}{m.group(2)}{MASK}", value)


def mask_sensitive_data(
    _logger: Any, _method: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Mask client documents (CPF/CNPJ), e-mails and credentials in log values.

    Order and product ids are UUIDs and never match the document patterns.
    """
    for key, value in list(event_dict.items()):
        if isinstance(value, str):
            event_dict[key] = mask_value(value)
    return event_dict
