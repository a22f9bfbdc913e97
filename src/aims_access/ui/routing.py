"""UI – navigation collaborator port and the router scope."""
from __future__ import annotations

import abc
import contextvars
import dataclasses
from typing import Any, Mapping

from aims_access.ui.nodes import Navigate

_STACK: contextvars.ContextVar[tuple["RouterScope", ...]] = contextvars.ContextVar(
    "_router_scopes", default=()
)


class Navigator(abc.ABC):
    """Port: performs client-side navigation for the host application."""

    @abc.abstractmethod
    def navigate(
        self, to: str, *, replace: bool = False, state: Mapping[str, Any] | None = None
    ) -> None: ...


@dataclasses.dataclass
class RouterScope:
    """Binds a :class:`Navigator` and the location being rendered.

    Usage::

        with RouterScope(navigator, location="/admin/users"):
            node = RequirePermission(children=page, permissions=["users.read"]).render()
    """

    navigator: Navigator | None = None
    location: str | None = None

    def __enter__(self) -> "RouterScope":
        _STACK.set(_STACK.get() + (self,))
        return self

    def __exit__(self, *exc: object) -> None:
        stack = _STACK.get()
        if not stack or stack[-1] is not self:
            raise RuntimeError("RouterScope exited out of order")
        _STACK.set(stack[:-1])

    @staticmethod
    def current() -> "RouterScope | None":
        stack = _STACK.get()
        return stack[-1] if stack else None


def redirect(to: str) -> Navigate:
    """Build a history-replacing :class:`Navigate` and dispatch it if a navigator is bound.

    The originating location, when known, travels in ``state["from"]`` so the
    login flow can send the user back afterwards.
    """
    scope = RouterScope.current()
    state = {"from": scope.location} if scope is not None and scope.location else None
    node = Navigate(to=to, replace=True, state=state)
    if scope is not None and scope.navigator is not None:
        scope.navigator.navigate(node.to, replace=True, state=node.state)
    return node


__all__ = ["Navigator", "RouterScope", "redirect"]
