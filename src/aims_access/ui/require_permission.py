"""UI – ``RequirePermission``, the route-level gate.

Where :class:`~aims_access.ui.can.Can` hides content, this gate sends the
user elsewhere: on denial it renders the ``fallback`` if one was given,
otherwise a history-replacing redirect to ``redirect_to``.  Only ANY-of
semantics are supported here.
"""
from __future__ import annotations

import dataclasses
import functools
from typing import Any, Callable, Sequence

from aims_access.authz.context import PermissionContextValue, use_permissions
from aims_access.observability.audit import AuditOutcome
from aims_access.ui.nodes import Content, Renderable, default_route_loading, resolve
from aims_access.ui.routing import RouterScope, redirect


@dataclasses.dataclass(frozen=True)
class RequireResult:
    can_access: bool
    is_loading: bool


def _audit_denial(
    ctx: PermissionContextValue,
    permissions: Sequence[str] | None,
    roles: Sequence[str] | None,
) -> None:
    if ctx.audit is None or not ctx.settings.audit_denials:
        return
    scope = RouterScope.current()
    ctx.audit.log_access(
        ctx.store.principal,
        resource=(scope.location if scope is not None else None) or "<unknown>",
        outcome=AuditOutcome.DENIED,
        permissions=permissions or (),
        roles=roles or (),
    )


def deny(ctx: PermissionContextValue, fallback: Content, redirect_to: str | None) -> Renderable:
    """Render *fallback*, or redirect when there is none."""
    if fallback is not None:
        return resolve(fallback)
    return redirect(redirect_to or ctx.settings.unauthorized_path)


@dataclasses.dataclass
class RequirePermission:
    """Render *children* when ``can_access(permissions, roles)`` holds.

    ``None`` lists are treated as empty.  ``redirect_to=None`` takes the
    provider's ``AccessSettings.unauthorized_path`` (``"/unauthorized"``).
    """

    children: Content = None
    permissions: Sequence[str] | None = ()
    roles: Sequence[str] | None = ()
    fallback: Content = None
    redirect_to: str | None = None
    loading_component: Content = default_route_loading

    def render(self) -> Renderable:
        ctx = use_permissions()
        if ctx.is_loading:
            return resolve(self.loading_component)

        if not ctx.can_access(self.permissions, self.roles):
            _audit_denial(ctx, self.permissions, self.roles)
            return deny(ctx, self.fallback, self.redirect_to)

        return resolve(self.children)


def with_permission(
    component: Callable[..., Renderable],
    required_permissions: Sequence[str] = (),
    required_roles: Sequence[str] = (),
    *,
    redirect_to: str | None = None,
) -> Callable[..., Renderable]:
    """Return *component* guarded by a :class:`RequirePermission`.

    Props are forwarded unchanged when access is granted.
    """

    @functools.wraps(component)
    def wrapper(*args: Any, **kwargs: Any) -> Renderable:
        return RequirePermission(
            children=lambda: component(*args, **kwargs),
            permissions=required_permissions,
            roles=required_roles,
            redirect_to=redirect_to,
        ).render()

    return wrapper


def use_require_permission(
    permissions: Sequence[str] | None = (),
    roles: Sequence[str] | None = (),
) -> RequireResult:
    ctx = use_permissions()
    return RequireResult(can_access=ctx.can_access(permissions, roles), is_loading=ctx.is_loading)


__all__ = [
    "RequirePermission",
    "RequireResult",
    "deny",
    "use_require_permission",
    "with_permission",
]
