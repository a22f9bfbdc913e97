"""Observability – structlog logging and access auditing."""
from aims_access.observability.audit import AccessAuditLogger, AuditOutcome, PermissionChange
from aims_access.observability.logging import configure_from_settings, configure_logging, get_logger

__all__ = [
    "AccessAuditLogger",
    "AuditOutcome",
    "PermissionChange",
    "configure_from_settings",
    "configure_logging",
    "get_logger",
]
