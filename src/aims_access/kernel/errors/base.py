"""Root of the aims-access error hierarchy.

A denied check is never an error: predicates answer ``False``.  Only misuse
of the API and broken configuration raise.
"""

from __future__ import annotations

from typing import Any


class AccessError(Exception):
    """Base class for everything aims-access raises.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to ``default_code``).
        **context: Structured fields describing the failure; merged into
            :meth:`log_fields` so they can be passed straight to a structlog
            logger.
    """

    default_code: str = "access_error"

    def __init__(self, message: str, *, code: str | None = None, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.context: dict[str, Any] = {k: v for k, v in context.items() if v is not None}

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def log_fields(self) -> dict[str, Any]:
        """Key/value pairs for ``logger.error(event, **exc.log_fields())``."""
        return {"error_code": self.code, "error": self.message, **self.context}


__all__ = ["AccessError"]
