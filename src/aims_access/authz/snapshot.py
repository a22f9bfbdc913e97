"""Authz – immutable snapshot of the principal's grants."""
from __future__ import annotations

import dataclasses
from enum import Enum


class StoreState(str, Enum):
    """Lifecycle of a :class:`~aims_access.authz.store.PermissionStore`."""

    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    READY = "ready"


@dataclasses.dataclass(frozen=True)
class PermissionSnapshot:
    """Permissions and roles as seen by every reader at one instant.

    A store never mutates a snapshot; each transition publishes a new one.
    Empty sets mean "no grants", never "unknown".
    """

    permissions: frozenset[str] = frozenset()
    roles: frozenset[str] = frozenset()
    state: StoreState = StoreState.UNINITIALIZED

    @property
    def is_loading(self) -> bool:
        return self.state is not StoreState.READY

    @property
    def is_empty(self) -> bool:
        return not self.permissions and not self.roles


__all__ = ["PermissionSnapshot", "StoreState"]
