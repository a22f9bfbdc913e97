"""Observability – AccessAuditLogger.

A dedicated structured-log sink for access decisions and permission changes.
"""
from __future__ import annotations

import datetime
from enum import Enum
from typing import Any, Iterable

from aims_access.observability.logging import get_logger


class AuditOutcome(str, Enum):
    """Outcome of an access decision."""

    GRANTED = "granted"
    DENIED = "denied"


class PermissionChange(str, Enum):
    """Kind of change applied to a user's permission assignment."""

    GRANTED = "granted"
    REVOKED = "revoked"
    UPDATED = "updated"


class AccessAuditLogger:
    """Emit audit entries for security-sensitive decisions.

    All entries are emitted at ``WARNING`` level so they pass through
    restrictive log-level filters.

    Parameters
    ----------
    service:
        Logical service name injected into every entry.
    logger:
        Underlying structlog logger.  Defaults to one named ``audit``.
    """

    def __init__(self, service: str = "aims", logger: Any = None) -> None:
        self._service = service
        self._log = logger if logger is not None else get_logger("audit")

    @classmethod
    def from_settings(cls, settings: Any) -> "AccessAuditLogger":
        """Use ``settings.service_name`` as the service tag."""
        return cls(service=settings.service_name)

    def log_access(
        self,
        principal: Any,
        resource: str,
        outcome: AuditOutcome | str,
        *,
        permissions: Iterable[str] = (),
        roles: Iterable[str] = (),
        **extra: Any,
    ) -> None:
        """Record a gate decision for *resource* (a path or a UI region name)."""
        self._emit(
            "audit.access",
            principal_id=_principal_id(principal),
            resource=resource,
            outcome=outcome.value if isinstance(outcome, AuditOutcome) else str(outcome),
            required_permissions=sorted(permissions),
            required_roles=sorted(roles),
            **extra,
        )

    def log_permission_change(
        self,
        user_id: str,
        permission: str,
        action: PermissionChange | str,
        *,
        changed_by: str,
        old_value: bool | None = None,
        new_value: bool | None = None,
        notes: str | None = None,
    ) -> None:
        """Record a grant, revocation or update of *permission* for *user_id*."""
        entry: dict[str, Any] = {
            "user_id": user_id,
            "permission": permission,
            "action": action.value if isinstance(action, PermissionChange) else str(action),
            "changed_by": changed_by,
        }
        if old_value is not None:
            entry["old_value"] = old_value
        if new_value is not None:
            entry["new_value"] = new_value
        if notes:
            entry["notes"] = notes
        self._emit("audit.permission_change", **entry)

    def _emit(self, event: str, **fields: Any) -> None:
        self._log.warning(
            event,
            service=self._service,
            timestamp=datetime.datetime.now(datetime.timezone.utc).isoformat(),
            **fields,
        )


def _principal_id(principal: Any) -> str | None:
    if principal is None:
        return None
    return getattr(principal, "subject", None) or str(principal)


__all__ = ["AccessAuditLogger", "AuditOutcome", "PermissionChange"]
