"""
aims_access – client-side permission evaluation for the AIMS business suite.

Import path convention::

    from aims_access.authz import PermissionProvider, PermissionStore, use_permissions
    from aims_access.ui import Can, RequirePermission
    from aims_access.features import use_feature_flag
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
