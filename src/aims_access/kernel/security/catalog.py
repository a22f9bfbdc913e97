"""Kernel security – closed catalog of permission and role identifiers.

Every identifier the AIMS business modules gate on is listed here so a typo
in a gate fails at import time instead of silently denying.  The enums are
``str`` based; the evaluator still works on plain strings, and
:func:`identifier` turns either form into the raw string it compares.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping

from aims_access.kernel.errors import RequirementTypeError


class SystemPermission(str, Enum):
    """Fine-grained capabilities, named ``<module>.<action>``."""

    # User management
    USERS_CREATE = "users.create"
    USERS_READ = "users.read"
    USERS_UPDATE = "users.update"
    USERS_DELETE = "users.delete"
    USERS_MANAGE_ROLES = "users.manage_roles"
    # Role management
    ROLES_CREATE = "roles.create"
    ROLES_READ = "roles.read"
    ROLES_UPDATE = "roles.update"
    ROLES_DELETE = "roles.delete"
    # Admin
    ADMIN_OVERVIEW = "admin.overview"
    ADMIN_ACTIVE_USERS = "admin.active_users"
    ADMIN_USER_ACTIVITY = "admin.user_activity"
    ADMIN_SETTINGS = "admin.settings"
    # Sales
    SALES_CREATE = "sales.create"
    SALES_READ = "sales.read"
    SALES_UPDATE = "sales.update"
    SALES_DELETE = "sales.delete"
    SALES_EXPORT = "sales.export"
    # Point of sale
    POS_ACCESS = "pos.access"
    POS_SELL = "pos.sell"
    POS_REFUND = "pos.refund"
    POS_DISCOUNT = "pos.discount"
    POS_CASH_MANAGEMENT = "pos.cash_management"
    POS_PRODUCT_SEARCH = "pos.product_search"
    POS_PRICE_OVERRIDE = "pos.price_override"
    POS_CUSTOMER_LOOKUP = "pos.customer_lookup"
    POS_PAYMENT_CASH = "pos.payment_cash"
    POS_PAYMENT_CARD = "pos.payment_card"
    POS_PAYMENT_OTHER = "pos.payment_other"
    POS_RECEIPT_GENERATE = "pos.receipt_generate"
    POS_RECEIPT_REPRINT = "pos.receipt_reprint"
    # Inventory
    INVENTORY_CREATE = "inventory.create"
    INVENTORY_READ = "inventory.read"
    INVENTORY_UPDATE = "inventory.update"
    INVENTORY_DELETE = "inventory.delete"
    INVENTORY_ADJUST = "inventory.adjust"
    PRODUCTS_CREATE = "products.create"
    PRODUCTS_READ = "products.read"
    PRODUCTS_UPDATE = "products.update"
    PRODUCTS_DELETE = "products.delete"
    # HR
    HR_STAFF_CREATE = "hr.staff_create"
    HR_STAFF_READ = "hr.staff_read"
    HR_STAFF_UPDATE = "hr.staff_update"
    HR_STAFF_DELETE = "hr.staff_delete"
    HR_ATTENDANCE_READ = "hr.attendance_read"
    HR_ATTENDANCE_UPDATE = "hr.attendance_update"
    HR_TIMESHEET_MANAGE = "hr.timesheet_manage"
    HR_LEAVE_REQUESTS = "hr.leave_requests"
    HR_LEAVE_APPROVE = "hr.leave_approve"
    HR_LEAVE_REJECT = "hr.leave_reject"
    HR_LEAVE_CREATE = "hr.leave_create"
    HR_PAYROLL_READ = "hr.payroll_read"
    HR_PAYROLL_UPDATE = "hr.payroll_update"
    HR_COMPENSATION_MANAGE = "hr.compensation_manage"
    HR_PERFORMANCE_READ = "hr.performance_read"
    HR_PERFORMANCE_UPDATE = "hr.performance_update"
    HR_TRAINING_READ = "hr.training_read"
    HR_TRAINING_CREATE = "hr.training_create"
    HR_TRAINING_ASSIGN = "hr.training_assign"
    HR_ANALYTICS = "hr.analytics"
    # Marketing
    CAMPAIGNS_CREATE = "campaigns.create"
    CAMPAIGNS_READ = "campaigns.read"
    CAMPAIGNS_UPDATE = "campaigns.update"
    CAMPAIGNS_DELETE = "campaigns.delete"
    CAMPAIGNS_LAUNCH = "campaigns.launch"
    CAMPAIGNS_PAUSE = "campaigns.pause"
    CAMPAIGNS_ANALYTICS = "campaigns.analytics"
    TEMPLATES_CREATE = "templates.create"
    TEMPLATES_READ = "templates.read"
    TEMPLATES_UPDATE = "templates.update"
    TEMPLATES_DELETE = "templates.delete"
    NOTIFICATIONS_SEND = "notifications.send"
    NOTIFICATIONS_READ = "notifications.read"
    NOTIFICATIONS_MANAGE = "notifications.manage"
    # Reports
    REPORTS_READ = "reports.read"
    REPORTS_EXPORT = "reports.export"
    REPORTS_HR = "reports.hr"
    REPORTS_MARKETING = "reports.marketing"
    REPORTS_EVENTS = "reports.events"
    REPORTS_ANALYTICS = "reports.analytics"
    # Claims
    CLAIMS_CREATE = "claims.create"
    CLAIMS_READ = "claims.read"
    CLAIMS_UPDATE = "claims.update"
    CLAIMS_DELETE = "claims.delete"
    CLAIMS_APPROVE = "claims.approve"
    CLAIMS_REJECT = "claims.reject"
    # Branches
    BRANCHES_CREATE = "branches.create"
    BRANCHES_READ = "branches.read"
    BRANCHES_UPDATE = "branches.update"
    BRANCHES_DELETE = "branches.delete"
    BRANCHES_MANAGE = "branches.manage"
    # Client portal
    CLIENT_PROFILE = "client.profile"
    CLIENT_ORDERS = "client.orders"
    CLIENT_NOTIFICATIONS = "client.notifications"
    # Orders
    ORDERS_CREATE = "orders.create"
    ORDERS_READ = "orders.read"
    ORDERS_UPDATE = "orders.update"
    ORDERS_CANCEL = "orders.cancel"
    # Payments
    PAYMENTS_CREATE = "payments.create"
    PAYMENTS_READ = "payments.read"
    PAYMENTS_REFUND = "payments.refund"
    # Customers
    CUSTOMERS_CREATE = "customers.create"
    CUSTOMERS_READ = "customers.read"
    CUSTOMERS_UPDATE = "customers.update"
    # Suppliers
    SUPPLIERS_CREATE = "suppliers.create"
    SUPPLIERS_READ = "suppliers.read"
    SUPPLIERS_UPDATE = "suppliers.update"
    SUPPLIERS_DELETE = "suppliers.delete"
    # Settings
    SETTINGS_READ = "settings.read"
    SETTINGS_UPDATE = "settings.update"

    def __str__(self) -> str:
        return self.value


class SystemRole(str, Enum):
    """Coarse-grained grant bundles."""

    SUPER_ADMIN = "super_admin"
    ADMIN = "admin"
    HR_ADMIN = "hr_admin"
    HR = "hr"
    MARKETING_ADMIN = "marketing_admin"
    MARKETING = "marketing"
    SALES_ADMIN = "sales_admin"
    SALES_STAFF = "sales_staff"
    POS_CASHIER = "pos_cashier"
    INVENTORY_ADMIN = "inventory_admin"
    INVENTORY_CLERK = "inventory_clerk"
    ACCOUNTING_ADMIN = "accounting_admin"
    ACCOUNTING_STAFF = "accounting_staff"
    USER = "user"

    def __str__(self) -> str:
        return self.value


def identifier(value: str | Enum) -> str:
    """Return the raw string behind a catalog member (or *value* itself)."""
    if isinstance(value, Enum):
        return value.value
    return value


def identifiers(values: Iterable[str | Enum] | None, *, argument: str) -> tuple[str, ...]:
    """Normalise a list of identifiers; ``None`` is empty.

    A lone string (or catalog member) raises :class:`RequirementTypeError`.
    """
    if isinstance(values, str):
        raise RequirementTypeError(argument, identifier(values))
    return tuple(identifier(v) for v in values or ())


def _members(prefixes: tuple[str, ...]) -> tuple[SystemPermission, ...]:
    return tuple(p for p in SystemPermission if p.value.split(".", 1)[0] in prefixes)


PERMISSION_GROUPS: Mapping[str, tuple[SystemPermission, ...]] = MappingProxyType({
    "USER_MANAGEMENT": _members(("users",)),
    "ROLE_MANAGEMENT": _members(("roles",)),
    "ADMIN_MANAGEMENT": _members(("admin",)),
    "SALES_MANAGEMENT": _members(("sales",)),
    "POS_MANAGEMENT": _members(("pos",)),
    "INVENTORY_MANAGEMENT": _members(("inventory", "products")),
    "HR_MANAGEMENT": _members(("hr",)),
    "MARKETING_MANAGEMENT": _members(("campaigns", "templates", "notifications")),
    "REPORTS_MANAGEMENT": _members(("reports",)),
    "CLAIMS_MANAGEMENT": _members(("claims",)),
    "BRANCH_MANAGEMENT": _members(("branches",)),
    "CLIENT_MANAGEMENT": _members(("client",)),
    "ORDER_MANAGEMENT": _members(("orders",)),
    "PAYMENT_MANAGEMENT": _members(("payments",)),
    "CUSTOMER_MANAGEMENT": _members(("customers",)),
    "SUPPLIER_MANAGEMENT": _members(("suppliers",)),
    "SETTINGS_MANAGEMENT": _members(("settings",)),
})

ROLE_GROUPS: Mapping[str, tuple[SystemRole, ...]] = MappingProxyType({
    "ADMIN_ROLES": (SystemRole.SUPER_ADMIN, SystemRole.ADMIN),
    "HR_ROLES": (SystemRole.HR_ADMIN, SystemRole.HR),
    "MARKETING_ROLES": (SystemRole.MARKETING_ADMIN, SystemRole.MARKETING),
    "SALES_ROLES": (SystemRole.SALES_ADMIN, SystemRole.SALES_STAFF, SystemRole.POS_CASHIER),
    "INVENTORY_ROLES": (SystemRole.INVENTORY_ADMIN, SystemRole.INVENTORY_CLERK),
    "ACCOUNTING_ROLES": (SystemRole.ACCOUNTING_ADMIN, SystemRole.ACCOUNTING_STAFF),
    "USER_ROLES": (SystemRole.USER,),
})


def group_permissions(group: str) -> tuple[SystemPermission, ...]:
    """Return every permission in *group*; raises ``KeyError`` for unknown groups."""
    return PERMISSION_GROUPS[group]


def is_in_group(permission: str | SystemPermission, group: str) -> bool:
    value = identifier(permission)
    return any(p.value == value for p in PERMISSION_GROUPS[group])


def group_roles(group: str) -> tuple[SystemRole, ...]:
    """Return every role in *group*; raises ``KeyError`` for unknown groups."""
    return ROLE_GROUPS[group]


def is_role_in_group(role: str | SystemRole, group: str) -> bool:
    value = identifier(role)
    return any(r.value == value for r in ROLE_GROUPS[group])


def permission_display_name(permission: str | SystemPermission) -> str:
    """``"users.create"`` -> ``"Users Create"``."""
    module, _, action = identifier(permission).partition(".")
    return f"{module[:1].upper()}{module[1:]} {action[:1].upper()}{action[1:]}".strip()


def role_display_name(role: str | SystemRole) -> str:
    """``"super_admin"`` -> ``"Super Admin"``."""
    return " ".join(word[:1].upper() + word[1:] for word in identifier(role).split("_"))


__all__ = [
    "PERMISSION_GROUPS",
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
