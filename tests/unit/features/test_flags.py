"""Unit tests for permission-backed feature flags."""

from __future__ import annotations

import pytest

from aims_access.authz import PermissionProvider, PermissionStore
from aims_access.features import (
    FEATURE_FLAGS,
    FeatureFlagOptions,
    FeatureFlagResolver,
    FeatureFlagResult,
    check_feature_flag,
    is_enabled,
    use_all_feature_flags,
    use_feature_flag,
    use_multiple_feature_flags,
)
from aims_access.kernel.errors import ProviderScopeError
from aims_access.testing import render_with_permissions


# ---------------------------------------------------------------------------
# Static map
# ---------------------------------------------------------------------------


class TestFeatureMap:
    def test_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            FEATURE_FLAGS["new"] = ("x",)  # type: ignore[index]

    def test_known_entries(self) -> None:
        assert FEATURE_FLAGS["user_import_export"] == ("users.import", "users.export")
        assert len(FEATURE_FLAGS) == 26


# ---------------------------------------------------------------------------
# Single flag
# ---------------------------------------------------------------------------


class TestUseFeatureFlag:
    def test_any_of(self) -> None:
        result = render_with_permissions(lambda: use_feature_flag("user_import_export"), ["users.export"])
        assert result == FeatureFlagResult(
            is_enabled=True,
            is_loading=False,
            required_permissions=("users.import", "users.export"),
        )

    def test_all_of(self) -> None:
        opts = FeatureFlagOptions(require_all=True)
        result = render_with_permissions(lambda: use_feature_flag("user_import_export", opts), ["users.export"])
        assert result.is_enabled is False

    def test_unknown_feature_uses_fallback(self) -> None:
        opts = FeatureFlagOptions(fallback_value=True)
        assert render_with_permissions(lambda: is_enabled("nonexistent.feature", opts)) is True
        assert render_with_permissions(lambda: is_enabled("nonexistent.feature")) is False

    def test_unknown_feature_outside_provider_raises(self) -> None:
        with pytest.raises(ProviderScopeError):
            use_feature_flag("nonexistent.feature")
        with pytest.raises(ProviderScopeError):
            is_enabled("nonexistent.feature", FeatureFlagOptions(fallback_value=True))

    def test_unknown_feature_not_loading_while_store_loads(self) -> None:
        with PermissionProvider(PermissionStore()):
            result = use_feature_flag("nonexistent.feature", FeatureFlagOptions(fallback_value=True))
        assert result == FeatureFlagResult(is_enabled=True, is_loading=False)

    def test_known_feature_while_loading(self) -> None:
        with PermissionProvider(PermissionStore()):
            result = use_feature_flag("audit_logs")
        assert result.is_enabled is False
        assert result.is_loading is True
        assert result.required_permissions == ("audit.read",)

    def test_fallback_ignored_for_known_feature(self) -> None:
        opts = FeatureFlagOptions(fallback_value=True)
        assert render_with_permissions(lambda: is_enabled("audit_logs", opts)) is False

    def test_known_feature_outside_provider_raises(self) -> None:
        with pytest.raises(ProviderScopeError):
            is_enabled("audit_logs")


# ---------------------------------------------------------------------------
# Batch
# ---------------------------------------------------------------------------


class TestBatch:
    def test_multiple(self) -> None:
        summary = render_with_permissions(
            lambda: use_multiple_feature_flags(["audit_logs", "debug_mode", "unknown"]),
            ["audit.read"],
        )
        assert dict(summary.results) == {"audit_logs": True, "debug_mode": False, "unknown": False}
        assert summary.enabled_features == ("audit_logs",)
        assert summary.is_loading is False

    def test_multiple_loading(self) -> None:
        with PermissionProvider(PermissionStore()):
            summary = use_multiple_feature_flags(["audit_logs", "unknown"])
        assert summary.is_loading is True

    def test_batch_outside_provider_raises(self) -> None:
        with pytest.raises(ProviderScopeError):
            use_multiple_feature_flags(["nonexistent.feature"])
        with pytest.raises(ProviderScopeError):
            use_multiple_feature_flags([])

    def test_batch_rejects_single_name(self) -> None:
        with pytest.raises(TypeError):
            render_with_permissions(lambda: use_multiple_feature_flags("audit_logs"))

    def test_all_features(self) -> None:
        summary = render_with_permissions(use_all_feature_flags, ["debug.access", "api.manage"])
        assert set(summary.results) == set(FEATURE_FLAGS)
        assert set(summary.enabled_features) == {"debug_mode", "api_management"}


# ---------------------------------------------------------------------------
# Pure utility and custom maps
# ---------------------------------------------------------------------------


class TestCheckFeatureFlag:
    def test_explicit_permissions(self) -> None:
        assert check_feature_flag("sales_import_export", ["sales.import"]) is True
        assert check_feature_flag(
            "sales_import_export", ["sales.import"], FeatureFlagOptions(require_all=True)
        ) is False

    def test_unknown(self) -> None:
        assert check_feature_flag("nope", ["anything"]) is False
        assert check_feature_flag("nope", [], FeatureFlagOptions(fallback_value=True)) is True


class TestFeatureFlagResolver:
    def test_custom_map(self) -> None:
        resolver = FeatureFlagResolver({"pos_refunds": ["pos.refund"]})
        assert resolver.check("pos_refunds", ["pos.refund"]) is True
        assert resolver.check("audit_logs", ["audit.read"]) is False
        summary = render_with_permissions(resolver.use_all, ["pos.refund"])
        assert summary.enabled_features == ("pos_refunds",)

    def test_copy_is_isolated(self) -> None:
        source = {"x": ["a"]}
        resolver = FeatureFlagResolver(source)
        source["x"].append("b")
        assert resolver.required_permissions("x") == ("a",)

    def test_empty_entry_resolves_to_fallback(self) -> None:
        resolver = FeatureFlagResolver({"empty": []})
        opts = FeatureFlagOptions(fallback_value=True)
        assert render_with_permissions(lambda: resolver.is_enabled("empty", opts)) is True
        assert resolver.check("empty", [], opts) is True

    def test_string_entry_rejected(self) -> None:
        with pytest.raises(TypeError):
            FeatureFlagResolver({"pos_refunds": "pos.refund"})

    def test_check_rejects_string_permissions(self) -> None:
        with pytest.raises(TypeError):
            check_feature_flag("audit_logs", "audit.read")  # type: ignore[arg-type]
