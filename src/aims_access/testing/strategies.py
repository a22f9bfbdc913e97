"""Testing generators – Hypothesis strategies for snapshots and requirements."""
from __future__ import annotations

import hypothesis.strategies as st

from aims_access.authz.evaluator import AccessRequirement
from aims_access.authz.snapshot import PermissionSnapshot, StoreState
from aims_access.kernel.security.catalog import SystemPermission, SystemRole

_PERMISSIONS = [p.value for p in SystemPermission] + ["unknown.permission"]
_ROLES = [r.value for r in SystemRole] + ["unknown_role"]


def permission_ids() -> st.SearchStrategy[str]:
    return st.sampled_from(_PERMISSIONS)


def role_ids() -> st.SearchStrategy[str]:
    return st.sampled_from(_ROLES)


def snapshots(state: StoreState = StoreState.READY) -> st.SearchStrategy[PermissionSnapshot]:
    """Ready snapshots drawn from the catalog (plus one unknown id of each kind)."""
    return st.builds(
        PermissionSnapshot,
        permissions=st.frozensets(permission_ids(), max_size=12),
        roles=st.frozensets(role_ids(), max_size=4),
        state=st.just(state),
    )


def requirements() -> st.SearchStrategy[AccessRequirement]:
    return st.builds(
        AccessRequirement,
        permission=st.none() | permission_ids(),
        permissions=st.lists(permission_ids(), max_size=4).map(tuple),
        roles=st.lists(role_ids(), max_size=3).map(tuple),
        require_all=st.booleans(),
    )


__all__ = ["permission_ids", "requirements", "role_ids", "snapshots"]
