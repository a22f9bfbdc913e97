"""UI – the node model gates render into.

Nodes are immutable descriptions that a host turns into real widgets or
markup.  Anything that is not a node (strings, numbers, host objects,
``None``) passes through untouched.  A zero-argument callable is content that
is only produced when it is actually shown; see :func:`resolve`.
"""
from __future__ import annotations

import dataclasses
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Mapping, Union

Renderable = Any
Content = Union[Renderable, Callable[[], Renderable]]


class WrapperKind(str, Enum):
    """Element a granted :class:`~aims_access.ui.can.Can` wraps its children in."""

    DIV = "div"
    BUTTON = "button"
    SPAN = "span"


def _freeze(props: Mapping[str, Any] | None) -> Mapping[str, Any]:
    return MappingProxyType(dict(props or {}))


@dataclasses.dataclass(frozen=True)
class Element:
    tag: str
    props: Mapping[str, Any] = dataclasses.field(default_factory=lambda: MappingProxyType({}))
    children: tuple[Renderable, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "props", _freeze(self.props))


@dataclasses.dataclass(frozen=True)
class Navigate:
    """Render-time redirect: the host replaces (or pushes) *to* in history."""

    to: str
    replace: bool = True
    state: Mapping[str, Any] | None = None


def element(tag: str, props: Mapping[str, Any] | None = None, *children: Renderable) -> Element:
    return Element(tag=tag, props=props or {}, children=tuple(children))


def resolve(content: Content) -> Renderable:
    """Produce *content*, calling it first when it is a deferred callable."""
    if callable(content) and not isinstance(content, type):
        return content()
    return content


def default_loading_placeholder() -> Element:
    return element("div", {"class_name": "animate-pulse bg-gray-200 h-4 w-full rounded"})


def default_route_loading() -> Element:
    return element("div", {"class_name": "flex items-center justify-center p-4"}, "Loading...")


def default_page_loading() -> Element:
    return element(
        "div",
        {"class_name": "min-h-screen flex items-center justify-center"},
        element("div", {"class_name": "animate-spin rounded-full h-32 w-32 border-b-2 border-blue-600"}),
    )


__all__ = [
    "Content",
    "Element",
    "Navigate",
    "Renderable",
    "WrapperKind",
    "default_loading_placeholder",
    "default_page_loading",
    "default_route_loading",
    "element",
    "resolve",
]
