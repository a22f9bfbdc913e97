"""UI – page-level HOC with optional ALL-of semantics."""
from __future__ import annotations

import dataclasses
import functools
from typing import Any, Callable, Sequence

from aims_access.authz.context import use_permissions
from aims_access.authz.evaluator import AccessRequirement
from aims_access.ui.nodes import Content, Renderable, default_page_loading
from aims_access.ui.require_permission import deny


@dataclasses.dataclass(frozen=True)
class PagePermissionConfig:
    permissions: Sequence[str] = ()
    roles: Sequence[str] = ()
    require_all: bool = False
    redirect_to: str | None = None
    fallback: Content = None


@dataclasses.dataclass(frozen=True)
class PageAccess:
    has_access: bool
    is_loading: bool


def with_page_permissions(
    component: Callable[..., Renderable],
    config: PagePermissionConfig | None = None,
) -> Callable[..., Renderable]:
    """Guard a page component; denied pages redirect unless a fallback is set."""
    config = config or PagePermissionConfig()
    requirement = AccessRequirement.of(
        permissions=config.permissions,
        roles=config.roles,
        require_all=config.require_all,
    )

    @functools.wraps(component)
    def page(*args: Any, **kwargs: Any) -> Renderable:
        ctx = use_permissions()
        if ctx.is_loading:
            return default_page_loading()
        if not ctx.satisfies(requirement):
            return deny(ctx, config.fallback, config.redirect_to)
        return component(*args, **kwargs)

    return page


def use_page_permissions(
    permissions: Sequence[str] = (),
    roles: Sequence[str] = (),
    require_all: bool = False,
) -> PageAccess:
    ctx = use_permissions()
    if ctx.is_loading:
        return PageAccess(has_access=False, is_loading=True)
    requirement = AccessRequirement.of(permissions=permissions, roles=roles, require_all=require_all)
    return PageAccess(has_access=ctx.satisfies(requirement), is_loading=False)


__all__ = ["PageAccess", "PagePermissionConfig", "use_page_permissions", "with_page_permissions"]
