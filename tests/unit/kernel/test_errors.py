"""Unit tests for the kernel error hierarchy."""

from __future__ import annotations

import pytest
from structlog.testing import capture_logs

from aims_access.config import ConfigError, InvalidSettingError
from aims_access.kernel.errors import AccessError, ProviderScopeError, RequirementTypeError
from aims_access.observability import get_logger


class TestAccessError:
    def test_default_code(self) -> None:
        err = AccessError("boom")
        assert err.code == "access_error"
        assert err.message == "boom"
        assert str(err) == "boom"

    def test_context_drops_none(self) -> None:
        err = AccessError("boom", code="custom", hook=None, feature="pos.sales")
        assert err.context == {"feature": "pos.sales"}
        assert err.log_fields() == {
            "error_code": "custom",
            "error": "boom",
            "feature": "pos.sales",
        }

    def test_log_fields_feed_structlog(self) -> None:
        err = InvalidSettingError("log_level", "LOUD", "unknown logging level")
        with capture_logs() as logs:
            get_logger("aims_access.test").error("settings.invalid", **err.log_fields())
        assert logs[0]["error_code"] == "invalid_setting"
        assert logs[0]["setting"] == "log_level"

    def test_repr(self) -> None:
        assert repr(AccessError("boom")) == "AccessError(code='access_error', message='boom')"


class TestProviderScopeError:
    def test_default_message(self) -> None:
        err = ProviderScopeError()
        assert err.message == "use_permissions must be used within a PermissionProvider"
        assert err.code == "provider_scope"

    def test_hook_recorded(self) -> None:
        err = ProviderScopeError(hook="use_can")
        assert err.hook == "use_can"
        assert err.context == {"hook": "use_can"}


class TestRequirementTypeError:
    def test_is_type_error(self) -> None:
        with pytest.raises(TypeError):
            raise RequirementTypeError("roles", "admin")

    def test_message_names_argument(self) -> None:
        err = RequirementTypeError("permissions", "users.read")
        assert err.argument == "permissions"
        assert "'users.read'" in err.message
        assert isinstance(err, AccessError)


class TestConfigErrors:
    def test_invalid_setting(self) -> None:
        err = InvalidSettingError(
            "show_loading", "maybe", "expected a boolean", source="AIMS_ACCESS_SHOW_LOADING"
        )
        assert err.value == "maybe"
        assert err.code == "invalid_setting"
        assert "AIMS_ACCESS_SHOW_LOADING" in err.message
        assert isinstance(err, ConfigError)

    def test_raise_and_catch_as_root(self) -> None:
        with pytest.raises(AccessError):
            raise ConfigError("bad")
