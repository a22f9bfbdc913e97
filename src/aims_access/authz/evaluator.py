"""Authz – pure permission/role predicates over a snapshot.

Two empty-list rules live side by side and must not be unified:

* the primitives :meth:`Evaluator.has_any_permission` and
  :meth:`Evaluator.has_any_role` answer ``False`` for an empty candidate list;
* the combinators :meth:`Evaluator.can_access` and
  :meth:`Evaluator.satisfies` treat an empty requirement list as
  unconstrained.

Every list argument must be a real list: a bare string raises
:class:`~aims_access.kernel.errors.RequirementTypeError` (a ``TypeError``).
"""
from __future__ import annotations

import dataclasses
from types import MappingProxyType
from typing import Iterable, Mapping

from aims_access.authz.snapshot import PermissionSnapshot
from aims_access.kernel.security.catalog import identifier, identifiers

# Requesting the key also succeeds when any of the values is held.
# One direction only: holding "admin" never satisfies "super_admin".
ROLE_ALIASES: Mapping[str, frozenset[str]] = MappingProxyType({
    "admin": frozenset({"super_admin"}),
})


@dataclasses.dataclass(frozen=True)
class AccessRequirement:
    """What a protected region needs.

    ``permission`` is a single-id shorthand; when set it wins over
    ``permissions``.  ``require_all`` switches both clauses from ANY-of to
    ALL-of.
    """

    permission: str | None = None
    permissions: tuple[str, ...] = ()
    roles: tuple[str, ...] = ()
    require_all: bool = False

    @classmethod
    def of(
        cls,
        permission: str | None = None,
        permissions: Iterable[str] | None = None,
        roles: Iterable[str] | None = None,
        require_all: bool = False,
    ) -> "AccessRequirement":
        """Build a requirement, treating ``None`` lists as empty."""
        return cls(
            permission=identifier(permission) if permission else None,
            permissions=identifiers(permissions, argument="permissions"),
            roles=identifiers(roles, argument="roles"),
            require_all=require_all,
        )


class Evaluator:
    """Answers permission and role questions for one snapshot.

    Never blocks, never raises for unknown identifiers, never mutates.
    """

    __slots__ = ("_snapshot",)

    def __init__(self, snapshot: PermissionSnapshot) -> None:
        self._snapshot = snapshot

    @property
    def snapshot(self) -> PermissionSnapshot:
        return self._snapshot

    def has_permission(self, permission: str) -> bool:
        return identifier(permission) in self._snapshot.permissions

    def has_role(self, role: str) -> bool:
        name = identifier(role)
        held = self._snapshot.roles
        if name in held:
            return True
        return not held.isdisjoint(ROLE_ALIASES.get(name, ()))

    def has_any_permission(self, permissions: Iterable[str]) -> bool:
        return any(self.has_permission(p) for p in identifiers(permissions, argument="permissions"))

    def has_any_role(self, roles: Iterable[str]) -> bool:
        return any(self.has_role(r) for r in identifiers(roles, argument="roles"))

    def has_all_permissions(self, permissions: Iterable[str]) -> bool:
        return all(self.has_permission(p) for p in identifiers(permissions, argument="permissions"))

    def has_all_roles(self, roles: Iterable[str]) -> bool:
        return all(self.has_role(r) for r in identifiers(roles, argument="roles"))

    def can_access(
        self,
        required_permissions: Iterable[str] | None,
        required_roles: Iterable[str] | None = None,
    ) -> bool:
        """ANY-of permissions AND ANY-of roles; an empty or missing list passes."""
        permissions = identifiers(required_permissions, argument="required_permissions")
        roles = identifiers(required_roles, argument="required_roles")
        permission_clause = not permissions or self.has_any_permission(permissions)
        role_clause = not roles or self.has_any_role(roles)
        return permission_clause and role_clause

    def satisfies(self, requirement: AccessRequirement) -> bool:
        """Evaluate a full :class:`AccessRequirement` (single, ANY and ALL forms)."""
        if requirement.permission:
            permission_clause = self.has_permission(requirement.permission)
        elif requirement.permissions:
            if requirement.require_all:
                permission_clause = self.has_all_permissions(requirement.permissions)
            else:
                permission_clause = self.has_any_permission(requirement.permissions)
        else:
            permission_clause = True

        if requirement.roles:
            if requirement.require_all:
                role_clause = self.has_all_roles(requirement.roles)
            else:
                role_clause = self.has_any_role(requirement.roles)
        else:
            role_clause = True

        return permission_clause and role_clause


__all__ = ["ROLE_ALIASES", "AccessRequirement", "Evaluator"]
