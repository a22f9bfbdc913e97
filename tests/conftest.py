"""Shared fixtures for the aims-access test suite."""

from __future__ import annotations

from aims_access.testing.fixtures import (  # noqa: F401
    auth,
    permission_scope,
    permission_store,
    recording_navigator,
)
