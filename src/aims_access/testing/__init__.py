"""Testing support – fakes, helpers, strategies and pytest fixtures.

Import in your ``conftest.py``::

    pytest_plugins = ["aims_access.testing.fixtures"]
"""

from aims_access.testing.fakes import NavigationEvent, RecordingNavigator
from aims_access.testing.helpers import make_store, render_with_permissions

__all__ = [
    "NavigationEvent",
    "RecordingNavigator",
    "make_store",
    "render_with_permissions",
]
