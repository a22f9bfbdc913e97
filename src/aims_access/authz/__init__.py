"""Authz – permission store, evaluator and provider scope."""
from aims_access.authz.auth import AuthCollaborator, InMemoryAuthCollaborator
from aims_access.authz.context import (
    PermissionContextValue,
    PermissionProvider,
    use_permissions,
)
from aims_access.authz.evaluator import ROLE_ALIASES, AccessRequirement, Evaluator
from aims_access.authz.snapshot import PermissionSnapshot, StoreState
from aims_access.authz.store import PermissionStore

__all__ = [
    "ROLE_ALIASES",
    "AccessRequirement",
    "AuthCollaborator",
    "Evaluator",
    "InMemoryAuthCollaborator",
    "PermissionContextValue",
    "PermissionProvider",
    "PermissionSnapshot",
    "PermissionStore",
    "StoreState",
    "use_permissions",
]
