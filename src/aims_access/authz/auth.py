"""Authz – Auth Collaborator port and an in-memory implementation.

The collaborator owns authentication; the permission store only reads the
grants it already resolved.
"""
from __future__ import annotations

import abc
from typing import Any, Callable, Mapping

from aims_access.kernel.security.principal import Principal
from aims_access.observability.logging import get_logger

AuthListener = Callable[[], None]

logger = get_logger(__name__)


class AuthCollaborator(abc.ABC):
    """Port: the session holder the permission store ingests from."""

    @abc.abstractmethod
    def current_principal(self) -> Principal | None:
        """Return the cached authenticated principal, or ``None``."""

    @property
    def is_authenticated(self) -> bool:
        return self.current_principal() is not None

    @abc.abstractmethod
    def subscribe(self, listener: AuthListener) -> Callable[[], None]:
        """Call *listener* after every login/logout; returns an unsubscribe callable."""


class InMemoryAuthCollaborator(AuthCollaborator):
    """Holds the session in memory; used by tests and embedded hosts.

    Usage::

        auth = InMemoryAuthCollaborator()
        store = PermissionStore().connect(auth)
        auth.login({"id": "u-1", "permissions": ["users.read"], "roles": ["hr"]})
    """

    def __init__(self, principal: Principal | None = None) -> None:
        self._principal = principal
        self._listeners: list[AuthListener] = []

    def current_principal(self) -> Principal | None:
        return self._principal

    def subscribe(self, listener: AuthListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def login(self, principal: Principal | Mapping[str, Any]) -> Principal:
        """Replace the session with *principal* (or a raw session payload)."""
        if not isinstance(principal, Principal):
            principal = Principal.from_payload(principal)
        self._principal = principal
        logger.info("auth.login", subject=principal.subject)
        self._notify()
        return principal

    def logout(self) -> None:
        if self._principal is not None:
            logger.info("auth.logout", subject=self._principal.subject)
        self._principal = None
        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()


__all__ = ["AuthCollaborator", "AuthListener", "InMemoryAuthCollaborator"]
