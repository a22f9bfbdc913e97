"""Unit tests for logging configuration and the access audit logger."""

from __future__ import annotations

import logging

import structlog
from structlog.testing import capture_logs

from aims_access.authz import PermissionStore
from aims_access.config import AccessSettings
from aims_access.kernel.security import Principal
from aims_access.observability import (
    AccessAuditLogger,
    AuditOutcome,
    PermissionChange,
    configure_from_settings,
    configure_logging,
    get_logger,
)


class TestConfigureLogging:
    def test_installs_single_root_handler(self) -> None:
        root = logging.getLogger()
        saved_handlers, saved_level = list(root.handlers), root.level
        try:
            configure_logging("DEBUG", json=False)
            assert len(root.handlers) == 1
            assert root.level == logging.DEBUG
        finally:
            structlog.reset_defaults()
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)

    def test_from_settings(self) -> None:
        root = logging.getLogger()
        saved_handlers, saved_level = list(root.handlers), root.level
        try:
            configure_from_settings(AccessSettings(log_level="warning", log_json=True))
            assert root.level == logging.WARNING
        finally:
            structlog.reset_defaults()
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)


class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        with capture_logs() as logs:
            get_logger("t", module="pos").info("hello")
        assert logs[0]["module"] == "pos"
        assert logs[0]["event"] == "hello"


class TestStoreLogging:
    def test_transitions_are_logged(self) -> None:
        with capture_logs() as logs:
            store = PermissionStore()
            store.begin_loading()
            store.ingest(["a"], ["hr"])
            store.clear()
        events = [e["event"] for e in logs]
        assert events == [
            "permission_store.loading",
            "permission_store.ingested",
            "permission_store.cleared",
        ]
        assert logs[1]["roles"] == ["hr"]


class TestAccessAuditLogger:
    def test_log_access(self) -> None:
        with capture_logs() as logs:
            AccessAuditLogger(service="pos").log_access(
                Principal(subject="u-1"),
                "/pos/refunds",
                AuditOutcome.GRANTED,
                permissions=["pos.refund"],
            )
        entry = logs[0]
        assert entry["event"] == "audit.access"
        assert entry["log_level"] == "warning"
        assert entry["service"] == "pos"
        assert entry["principal_id"] == "u-1"
        assert entry["outcome"] == "granted"
        assert "timestamp" in entry

    def test_log_access_without_principal(self) -> None:
        with capture_logs() as logs:
            AccessAuditLogger().log_access(None, "/x", "denied")
        assert logs[0]["principal_id"] is None
        assert logs[0]["outcome"] == "denied"

    def test_log_permission_change(self) -> None:
        with capture_logs() as logs:
            AccessAuditLogger().log_permission_change(
                "u-2",
                "hr.payroll_read",
                PermissionChange.REVOKED,
                changed_by="admin-1",
                old_value=True,
                new_value=False,
            )
        entry = logs[0]
        assert entry["event"] == "audit.permission_change"
        assert entry["action"] == "revoked"
        assert entry["old_value"] is True
        assert entry["new_value"] is False
        assert "notes" not in entry

    def test_from_settings_uses_service_name(self) -> None:
        with capture_logs() as logs:
            AccessAuditLogger.from_settings(AccessSettings(service_name="hr")).log_access(
                None, "/hr", AuditOutcome.DENIED
            )
        assert logs[0]["service"] == "hr"
