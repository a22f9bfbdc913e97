"""Kernel security – Principal and the permission/role catalog."""
from aims_access.kernel.security.catalog import (
    PERMISSION_GROUPS,
    ROLE_GROUPS,
    SystemPermission,
    SystemRole,
    group_permissions,
    group_roles,
    identifier,
    identifiers,
    is_in_group,
    is_role_in_group,
    permission_display_name,
    role_display_name,
)
from aims_access.kernel.security.principal import Principal

__all__ = [
    "PERMISSION_GROUPS",
    "Principal",
    "ROLE_GROUPS",
    "SystemPermission",
    "SystemRole",
    "group_permissions",
    "group_roles",
    "identifier",
    "identifiers",
    "is_in_group",
    "is_role_in_group",
    "permission_display_name",
    "role_display_name",
]
