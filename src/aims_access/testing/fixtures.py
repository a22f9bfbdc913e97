"""Testing fixtures – pytest fixtures for stores, provider scopes and navigation.

Enable in ``conftest.py``::

    pytest_plugins = ["aims_access.testing.fixtures"]
"""
from __future__ import annotations

import pytest

from aims_access.authz import InMemoryAuthCollaborator, PermissionProvider, PermissionStore
from aims_access.testing.fakes import RecordingNavigator
from aims_access.ui.routing import RouterScope


@pytest.fixture
def auth() -> InMemoryAuthCollaborator:
    """A logged-out auth collaborator."""
    return InMemoryAuthCollaborator()


@pytest.fixture
def permission_store(auth: InMemoryAuthCollaborator) -> PermissionStore:
    """A store connected to :func:`auth`; ``READY`` and empty until a login."""
    store = PermissionStore().connect(auth)
    yield store
    store.disconnect()


@pytest.fixture
def permission_scope(permission_store: PermissionStore):
    """Bind :func:`permission_store` for the duration of the test."""
    with PermissionProvider(permission_store) as provider:
        yield provider


@pytest.fixture
def recording_navigator():
    """A :class:`RecordingNavigator` bound in a router scope at ``/current``."""
    navigator = RecordingNavigator()
    with RouterScope(navigator, location="/current"):
        yield navigator


__all__ = ["auth", "permission_scope", "permission_store", "recording_navigator"]
