"""Exceptions raised by the calculation core."""
from __future__ import annotations

from typing import Any, Dict, Optional


class InvalidInputError(ValueError):
    """Raised when a calculation receives inputs it cannot compute with.

    Examples are a non-positive financed principal or a period count below
    one.  Regulatory breaches are *not* reported through this exception; they
    are returned as :class:`core.models.ComplianceWarning` records.

    ``context`` carries the offending values so callers can show a precise
    message without parsing the text.
    """

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({ctx})"
        return self.message
