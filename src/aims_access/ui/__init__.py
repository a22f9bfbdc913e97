"""UI – access gates, route gates and the node model they render into."""
from aims_access.ui.can import Can, CanResult, use_can, with_can
from aims_access.ui.nodes import (
    Element,
    Navigate,
    WrapperKind,
    element,
    resolve,
)
from aims_access.ui.page_permissions import (
    PageAccess,
    PagePermissionConfig,
    use_page_permissions,
    with_page_permissions,
)
from aims_access.ui.require_permission import (
    RequirePermission,
    RequireResult,
    use_require_permission,
    with_permission,
)
from aims_access.ui.routing import Navigator, RouterScope, redirect

__all__ = [
    "Can",
    "CanResult",
    "Element",
    "Navigate",
    "Navigator",
    "PageAccess",
    "PagePermissionConfig",
    "RequirePermission",
    "RequireResult",
    "RouterScope",
    "WrapperKind",
    "element",
    "redirect",
    "resolve",
    "use_can",
    "use_page_permissions",
    "use_require_permission",
    "with_can",
    "with_page_permissions",
    "with_permission",
]
