"""UI – ``Can``, the render-level access gate, with its hook and HOC forms.

Examples::

    # default div wrapper
    Can(children=add_user_button, permission="users.create").render()

    # as a button with forwarded attributes
    Can(
        children="Add User",
        permission=SystemPermission.USERS_CREATE,
        as_=WrapperKind.BUTTON,
        props={"class_name": "btn-primary", "on_click": handle_click},
    ).render()

    # ANY of several permissions / ALL of them
    Can(children=admin_panel, permissions=["users.update", "users.delete"]).render()
    Can(children=full_panel, permissions=["users.update", "users.delete"], require_all=True).render()

    # role + permission combination
    Can(children=settings_panel, roles=["admin"], permissions=["settings.read"]).render()
"""
from __future__ import annotations

import dataclasses
import functools
from typing import Any, Callable, Iterable, Mapping, Sequence

from aims_access.authz.context import use_permissions
from aims_access.authz.evaluator import AccessRequirement
from aims_access.ui.nodes import (
    Content,
    Element,
    Renderable,
    WrapperKind,
    default_loading_placeholder,
    resolve,
)


@dataclasses.dataclass(frozen=True)
class CanResult:
    can: bool
    is_loading: bool

    def __bool__(self) -> bool:
        return self.can


@dataclasses.dataclass
class Can:
    """Render *children* only when the current principal meets the requirement.

    While the store is loading and ``show_loading`` is set, the loading
    component wins regardless of the eventual outcome.  ``show_loading=None``
    takes the provider's ``AccessSettings.show_loading``.
    """

    children: Content = None
    permission: str | None = None
    permissions: Sequence[str] = ()
    roles: Sequence[str] = ()
    require_all: bool = False
    fallback: Content = None
    show_loading: bool | None = None
    loading_component: Content = default_loading_placeholder
    as_: WrapperKind | str = WrapperKind.DIV
    props: Mapping[str, Any] = dataclasses.field(default_factory=dict)

    def requirement(self) -> AccessRequirement:
        return AccessRequirement.of(
            permission=self.permission,
            permissions=self.permissions,
            roles=self.roles,
            require_all=self.require_all,
        )

    def render(self) -> Renderable:
        ctx = use_permissions()
        show_loading = ctx.settings.show_loading if self.show_loading is None else self.show_loading

        if ctx.is_loading and show_loading:
            return resolve(self.loading_component)

        if not ctx.satisfies(self.requirement()):
            return resolve(self.fallback)

        return Element(
            tag=WrapperKind(self.as_).value,
            props=self.props,
            children=(resolve(self.children),),
        )


def use_can(
    permission: str | None = None,
    permissions: Iterable[str] | None = None,
    roles: Iterable[str] | None = None,
    require_all: bool = False,
) -> CanResult:
    """Same decision as :class:`Can` without rendering; ``can`` is ``False`` while loading."""
    ctx = use_permissions()
    if ctx.is_loading:
        return CanResult(can=False, is_loading=True)
    requirement = AccessRequirement.of(permission, permissions, roles, require_all)
    return CanResult(can=ctx.satisfies(requirement), is_loading=False)


def with_can(
    component: Callable[..., Renderable] | None = None,
    *,
    permission: str | None = None,
    permissions: Sequence[str] = (),
    roles: Sequence[str] = (),
    require_all: bool = False,
    fallback: Content = None,
) -> Any:
    """Wrap *component* in a :class:`Can`; usable directly or as a decorator.

    The component is only called when access is granted, with the props it
    was given.  ::

        @with_can(permission="users.create")
        def add_user_form(**props): ...
    """

    def decorator(fn: Callable[..., Renderable]) -> Callable[..., Renderable]:
        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Renderable:
            return Can(
                children=lambda: fn(*args, **kwargs),
                permission=permission,
                permissions=permissions,
                roles=roles,
                require_all=require_all,
                fallback=fallback,
            ).render()

        return wrapper

    if component is not None:
        return decorator(component)
    return decorator


__all__ = ["Can", "CanResult", "use_can", "with_can"]
