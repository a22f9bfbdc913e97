"""Testing helpers – build stores and render under a provider in one call."""
from __future__ import annotations

from typing import Any, Callable, Iterable, TypeVar

from aims_access.authz import InMemoryAuthCollaborator, PermissionProvider, PermissionStore
from aims_access.config import AccessSettings
from aims_access.kernel.security import identifiers

T = TypeVar("T")


def make_store(
    permissions: Iterable[str] = (),
    roles: Iterable[str] = (),
    *,
    subject: str = "test-user",
) -> PermissionStore:
    """Return a ``READY`` store following an auth collaborator logged in as *subject*."""
    auth = InMemoryAuthCollaborator()
    auth.login(
        {
            "id": subject,
            "email": "test@example.com",
            "is_active": True,
            "permissions": identifiers(permissions, argument="permissions"),
            "roles": identifiers(roles, argument="roles"),
        }
    )
    return PermissionStore().connect(auth)


def render_with_permissions(
    render: Callable[[], T],
    permissions: Iterable[str] = (),
    roles: Iterable[str] = (),
    *,
    subject: str = "test-user",
    settings: AccessSettings | None = None,
    **provider_kwargs: Any,
) -> T:
    """Call *render* inside a provider whose principal holds *permissions*/*roles*."""
    store = make_store(permissions, roles, subject=subject)
    with PermissionProvider(store, settings=settings, **provider_kwargs):
        return render()


__all__ = ["make_store", "render_with_permissions"]
