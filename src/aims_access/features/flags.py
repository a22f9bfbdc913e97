"""Features – permission-backed feature flags.

A feature is enabled when the principal holds its configured permissions
(ANY-of by default, ALL-of with ``require_all``).  Names missing from the map
resolve to ``fallback_value`` without consulting the evaluator.  The
``use_*`` hooks still require a provider scope for every name; only
:func:`check_feature_flag` runs without one.
"""
from __future__ import annotations

import dataclasses
from types import MappingProxyType
from typing import Iterable, Mapping

from aims_access.authz.context import use_permissions
from aims_access.kernel.security.catalog import identifiers

FEATURE_FLAGS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    # Analytics
    "advanced_analytics": ("analytics.advanced",),
    "real_time_analytics": ("analytics.realtime",),
    "custom_reports": ("reports.custom",),
    # User management
    "bulk_user_operations": ("users.bulk",),
    "user_import_export": ("users.import", "users.export"),
    "advanced_user_search": ("users.search.advanced",),
    # Inventory
    "bulk_inventory_operations": ("inventory.bulk",),
    "inventory_import_export": ("inventory.import", "inventory.export"),
    "low_stock_alerts": ("inventory.alerts",),
    # Sales
    "bulk_sales_operations": ("sales.bulk",),
    "sales_import_export": ("sales.import", "sales.export"),
    "advanced_sales_analytics": ("sales.analytics.advanced",),
    # Marketing
    "email_campaigns": ("marketing.email",),
    "sms_campaigns": ("marketing.sms",),
    "advanced_marketing_analytics": ("marketing.analytics.advanced",),
    # System
    "system_settings": ("settings.system",),
    "audit_logs": ("audit.read",),
    "backup_restore": ("system.backup",),
    "api_management": ("api.manage",),
    # Admin
    "role_management": ("roles.manage",),
    "permission_management": ("permissions.manage",),
    "user_activity_monitoring": ("users.activity.monitor",),
    "system_health_monitoring": ("system.health.monitor",),
    # Development
    "debug_mode": ("debug.access",),
    "test_data_generation": ("test.data.generate",),
    "performance_monitoring": ("performance.monitor",),
})


@dataclasses.dataclass(frozen=True)
class FeatureFlagOptions:
    fallback_value: bool = False
    require_all: bool = False


@dataclasses.dataclass(frozen=True)
class FeatureFlagResult:
    is_enabled: bool
    is_loading: bool
    required_permissions: tuple[str, ...] = ()


@dataclasses.dataclass(frozen=True)
class FeatureFlagSummary:
    results: Mapping[str, bool]
    enabled_features: tuple[str, ...]
    is_loading: bool


_DEFAULT_OPTIONS = FeatureFlagOptions()


def _matches(required: tuple[str, ...], held: frozenset[str] | set[str], require_all: bool) -> bool:
    if require_all:
        return all(p in held for p in required)
    return any(p in held for p in required)


class FeatureFlagResolver:
    """Resolves feature names against a static ``name -> permissions`` map.

    Parameters
    ----------
    flags:
        The map to resolve against; defaults to :data:`FEATURE_FLAGS`.  The
        resolver keeps a read-only copy.
    """

    def __init__(self, flags: Mapping[str, Iterable[str]] | None = None) -> None:
        source = FEATURE_FLAGS if flags is None else flags
        self._flags: Mapping[str, tuple[str, ...]] = MappingProxyType(
            {name: identifiers(perms, argument=name) for name, perms in source.items()}
        )

    @property
    def flags(self) -> Mapping[str, tuple[str, ...]]:
        return self._flags

    def required_permissions(self, feature: str) -> tuple[str, ...]:
        return self._flags.get(feature, ())

    def check(
        self,
        feature: str,
        permissions: Iterable[str],
        options: FeatureFlagOptions | None = None,
    ) -> bool:
        """Resolve *feature* against an explicit permission list (no provider needed)."""
        options = options or _DEFAULT_OPTIONS
        required = self.required_permissions(feature)
        if not required:
            return options.fallback_value
        held = frozenset(identifiers(permissions, argument="permissions"))
        return _matches(required, held, options.require_all)

    def use(self, feature: str, options: FeatureFlagOptions | None = None) -> FeatureFlagResult:
        """Resolve *feature* for the principal in the current provider scope."""
        ctx = use_permissions()
        options = options or _DEFAULT_OPTIONS
        required = self.required_permissions(feature)
        if not required:
            return FeatureFlagResult(is_enabled=options.fallback_value, is_loading=False)

        if ctx.is_loading:
            return FeatureFlagResult(is_enabled=False, is_loading=True, required_permissions=required)

        evaluator = ctx.evaluator
        if options.require_all:
            enabled = evaluator.has_all_permissions(required)
        else:
            enabled = evaluator.has_any_permission(required)
        return FeatureFlagResult(is_enabled=enabled, is_loading=False, required_permissions=required)

    def is_enabled(self, feature: str, options: FeatureFlagOptions | None = None) -> bool:
        return self.use(feature, options).is_enabled

    def use_many(
        self, features: Iterable[str], options: FeatureFlagOptions | None = None
    ) -> FeatureFlagSummary:
        use_permissions()
        names = identifiers(features, argument="features")
        results = {feature: self.use(feature, options) for feature in names}
        return FeatureFlagSummary(
            results=MappingProxyType({name: r.is_enabled for name, r in results.items()}),
            enabled_features=tuple(name for name, r in results.items() if r.is_enabled),
            is_loading=any(r.is_loading for r in results.values()),
        )

    def use_all(self, options: FeatureFlagOptions | None = None) -> FeatureFlagSummary:
        return self.use_many(self._flags, options)


_resolver = FeatureFlagResolver()


def use_feature_flag(feature: str, options: FeatureFlagOptions | None = None) -> FeatureFlagResult:
    return _resolver.use(feature, options)


def is_enabled(feature: str, options: FeatureFlagOptions | None = None) -> bool:
    return _resolver.is_enabled(feature, options)


def use_multiple_feature_flags(
    features: Iterable[str], options: FeatureFlagOptions | None = None
) -> FeatureFlagSummary:
    return _resolver.use_many(features, options)


def use_all_feature_flags(options: FeatureFlagOptions | None = None) -> FeatureFlagSummary:
    """Every feature in :data:`FEATURE_FLAGS`; meant for feature-discovery screens."""
    return _resolver.use_all(options)


def check_feature_flag(
    feature: str,
    permissions: Iterable[str],
    options: FeatureFlagOptions | None = None,
) -> bool:
    return _resolver.check(feature, permissions, options)


__all__ = [
    "FEATURE_FLAGS",
    "FeatureFlagOptions",
    "FeatureFlagResolver",
    "FeatureFlagResult",
    "FeatureFlagSummary",
    "check_feature_flag",
    "is_enabled",
    "use_all_feature_flags",
    "use_feature_flag",
    "use_multiple_feature_flags",
]
