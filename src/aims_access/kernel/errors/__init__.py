"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    AccessError
    ├── ProviderScopeError
    ├── RequirementTypeError       (also a TypeError)
    └── ConfigError                (aims_access.config.errors)
        └── InvalidSettingError
"""

from aims_access.kernel.errors.application import ProviderScopeError, RequirementTypeError
from aims_access.kernel.errors.base import AccessError

__all__ = ["AccessError", "ProviderScopeError", "RequirementTypeError"]
