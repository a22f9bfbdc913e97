"""Kernel security – Principal as handed over by the auth layer."""
from __future__ import annotations

import dataclasses
from typing import Any, Mapping

from aims_access.kernel.security.catalog import identifiers


@dataclasses.dataclass(frozen=True)
class Principal:
    """Authenticated user with grants already flattened server-side."""
    subject: str
    permissions: frozenset[str] = frozenset()
    roles: frozenset[str] = frozenset()
    claims: dict[str, Any] = dataclasses.field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Principal":
        """Build a principal from a login/session payload.

        Missing or ``None`` ``permissions`` / ``roles`` become empty sets.
        Every other key is kept in :attr:`claims`.
        """
        subject = payload.get("id") or payload.get("subject") or ""
        claims = {
            k: v for k, v in payload.items()
            if k not in ("id", "subject", "permissions", "roles")
        }
        return cls(
            subject=str(subject),
            permissions=frozenset(identifiers(payload.get("permissions"), argument="permissions")),
            roles=frozenset(identifiers(payload.get("roles"), argument="roles")),
            claims=claims,
        )

    def __str__(self) -> str:
        return self.subject


__all__ = ["Principal"]
