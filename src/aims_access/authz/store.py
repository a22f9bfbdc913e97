"""Authz – PermissionStore, the single source of truth for current grants.

State machine::

    UNINITIALIZED ──► LOADING ──► READY(populated | empty)
                        ▲            │
                        └── refresh ─┘      clear(): READY(empty), directly

Every transition swaps one immutable :class:`PermissionSnapshot` for another
and notifies subscribers with it, so readers never see half an update.
"""
from __future__ import annotations

from typing import Any, Callable, Iterable

from aims_access.authz.auth import AuthCollaborator
from aims_access.authz.evaluator import Evaluator
from aims_access.authz.snapshot import PermissionSnapshot, StoreState
from aims_access.kernel.security.catalog import identifiers
from aims_access.kernel.security.principal import Principal
from aims_access.observability.logging import get_logger

SnapshotListener = Callable[[PermissionSnapshot], None]

logger = get_logger(__name__)


class PermissionStore:
    """Holds the authenticated principal's permissions and roles.

    Mutated only through :meth:`ingest`, :meth:`clear`, :meth:`refresh` and
    :meth:`sync`; everything else reads :attr:`snapshot`.

    Parameters
    ----------
    auth:
        Optional Auth Collaborator used by :meth:`refresh` and :meth:`sync`.
        :meth:`connect` sets it later.
    """

    def __init__(self, auth: AuthCollaborator | None = None) -> None:
        self._auth = auth
        self._snapshot = PermissionSnapshot()
        self._listeners: list[SnapshotListener] = []
        self._disconnect: Callable[[], None] | None = None

    # ------------------------------------------------------------------
    # Read side
    # ------------------------------------------------------------------

    @property
    def snapshot(self) -> PermissionSnapshot:
        return self._snapshot

    @property
    def state(self) -> StoreState:
        return self._snapshot.state

    @property
    def is_loading(self) -> bool:
        return self._snapshot.is_loading

    @property
    def permissions(self) -> frozenset[str]:
        return self._snapshot.permissions

    @property
    def roles(self) -> frozenset[str]:
        return self._snapshot.roles

    @property
    def principal(self) -> Principal | None:
        """The collaborator's cached principal, if any."""
        return self._auth.current_principal() if self._auth is not None else None

    def evaluator(self) -> Evaluator:
        """Return an :class:`Evaluator` bound to the current snapshot."""
        return Evaluator(self._snapshot)

    def subscribe(self, listener: SnapshotListener) -> Callable[[], None]:
        """Call *listener* with every new snapshot; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ------------------------------------------------------------------
    # Write side
    # ------------------------------------------------------------------

    def begin_loading(self) -> None:
        """Enter ``LOADING`` while keeping the current grants visible."""
        if self._snapshot.state is StoreState.LOADING:
            return
        logger.debug("permission_store.loading")
        self._publish(
            PermissionSnapshot(
                permissions=self._snapshot.permissions,
                roles=self._snapshot.roles,
                state=StoreState.LOADING,
            )
        )

    def ingest(
        self,
        permissions: Iterable[Any] | None,
        roles: Iterable[Any] | None,
    ) -> None:
        """Replace both sets wholesale and enter ``READY``.

        ``None`` counts as empty.  Idempotent.
        """
        snapshot = PermissionSnapshot(
            permissions=frozenset(identifiers(permissions, argument="permissions")),
            roles=frozenset(identifiers(roles, argument="roles")),
            state=StoreState.READY,
        )
        logger.debug(
            "permission_store.ingested",
            permissions=len(snapshot.permissions),
            roles=sorted(snapshot.roles),
        )
        self._publish(snapshot)

    def clear(self) -> None:
        """Drop every grant and enter ``READY`` without passing through ``LOADING``."""
        logger.debug("permission_store.cleared")
        self._publish(PermissionSnapshot(state=StoreState.READY))

    def refresh(self) -> None:
        """Re-ingest from the collaborator's cached principal.

        No network round trip; a no-op when there is no principal.
        """
        principal = self.principal
        if principal is None:
            return
        self.begin_loading()
        self.ingest(principal.permissions, principal.roles)

    def sync(self) -> None:
        """React to an auth state change: ingest the principal or clear."""
        principal = self.principal
        if principal is None:
            self.clear()
            return
        self.begin_loading()
        self.ingest(principal.permissions, principal.roles)

    def connect(self, auth: AuthCollaborator) -> "PermissionStore":
        """Follow *auth*: resync now and after every login/logout."""
        self.disconnect()
        self._auth = auth
        self._disconnect = auth.subscribe(self.sync)
        self.sync()
        return self

    def disconnect(self) -> None:
        if self._disconnect is not None:
            self._disconnect()
            self._disconnect = None

    def _publish(self, snapshot: PermissionSnapshot) -> None:
        self._snapshot = snapshot
        for listener in list(self._listeners):
            listener(snapshot)


__all__ = ["PermissionStore", "SnapshotListener"]
