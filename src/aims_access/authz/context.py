"""Authz – PermissionProvider scope and the ``use_permissions`` accessor.

The provider is constructed once at the application root and bound with a
``with`` block.  The binding lives in a :mod:`contextvars` variable, so every
thread and asyncio task sees only the provider it entered itself.
"""
from __future__ import annotations

import contextvars
import dataclasses
from typing import Iterable

from aims_access.authz.evaluator import AccessRequirement, Evaluator
from aims_access.authz.snapshot import PermissionSnapshot
from aims_access.authz.store import PermissionStore
from aims_access.config.settings import AccessSettings
from aims_access.kernel.errors import ProviderScopeError
from aims_access.observability.audit import AccessAuditLogger

# Innermost provider last; one stack per thread or asyncio task.
_STACK: contextvars.ContextVar[tuple["PermissionProvider", ...]] = contextvars.ContextVar(
    "_permission_providers", default=()
)


@dataclasses.dataclass(frozen=True)
class PermissionContextValue:
    """What a consumer sees: one snapshot plus the predicates over it."""

    snapshot: PermissionSnapshot
    settings: AccessSettings
    store: PermissionStore = dataclasses.field(repr=False, compare=False)
    audit: AccessAuditLogger | None = dataclasses.field(default=None, repr=False, compare=False)

    @property
    def permissions(self) -> frozenset[str]:
        return self.snapshot.permissions

    @property
    def roles(self) -> frozenset[str]:
        return self.snapshot.roles

    @property
    def is_loading(self) -> bool:
        return self.snapshot.is_loading

    @property
    def evaluator(self) -> Evaluator:
        return Evaluator(self.snapshot)

    def has_permission(self, permission: str) -> bool:
        return self.evaluator.has_permission(permission)

    def has_role(self, role: str) -> bool:
        return self.evaluator.has_role(role)

    def has_any_permission(self, permissions: Iterable[str]) -> bool:
        return self.evaluator.has_any_permission(permissions)

    def has_any_role(self, roles: Iterable[str]) -> bool:
        return self.evaluator.has_any_role(roles)

    def can_access(
        self,
        required_permissions: Iterable[str] | None,
        required_roles: Iterable[str] | None = None,
    ) -> bool:
        return self.evaluator.can_access(required_permissions, required_roles)

    def satisfies(self, requirement: AccessRequirement) -> bool:
        return self.evaluator.satisfies(requirement)

    def refresh_permissions(self) -> None:
        self.store.refresh()


class PermissionProvider:
    """Binds a :class:`PermissionStore` (and settings) for the enclosed code.

    Usage::

        store = PermissionStore().connect(auth)
        with PermissionProvider(store):
            page = render_app()

    Nested providers shadow outer ones until they exit.
    """

    def __init__(
        self,
        store: PermissionStore,
        *,
        settings: AccessSettings | None = None,
        audit: AccessAuditLogger | None = None,
    ) -> None:
        self.store = store
        self.settings = settings or AccessSettings()
        self.audit = audit

    def value(self) -> PermissionContextValue:
        return PermissionContextValue(
            snapshot=self.store.snapshot,
            settings=self.settings,
            store=self.store,
            audit=self.audit,
        )

    def __enter__(self) -> "PermissionProvider":
        _STACK.set(_STACK.get() + (self,))
        return self

    def __exit__(self, *exc: object) -> None:
        stack = _STACK.get()
        if not stack or stack[-1] is not self:
            raise ProviderScopeError("PermissionProvider exited out of order", hook="__exit__")
        _STACK.set(stack[:-1])

    @staticmethod
    def current() -> "PermissionProvider | None":
        """Return the provider bound in this context, or ``None``."""
        stack = _STACK.get()
        return stack[-1] if stack else None


def use_permissions() -> PermissionContextValue:
    """Return the current :class:`PermissionContextValue`.

    Raises :class:`ProviderScopeError` outside a :class:`PermissionProvider`.
    """
    provider = PermissionProvider.current()
    if provider is None:
        raise ProviderScopeError(hook="use_permissions")
    return provider.value()


__all__ = ["PermissionContextValue", "PermissionProvider", "use_permissions"]
