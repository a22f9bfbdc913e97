"""Misuse of the authorization API surface."""

from __future__ import annotations

from aims_access.kernel.errors.base import AccessError


class ProviderScopeError(AccessError):
    """A permission hook was called outside of a :class:`PermissionProvider`."""

    default_code = "provider_scope"

    def __init__(
        self,
        message: str = "use_permissions must be used within a PermissionProvider",
        *,
        hook: str | None = None,
    ) -> None:
        super().__init__(message, hook=hook)
        self.hook = hook


class RequirementTypeError(AccessError, TypeError):
    """A single string was passed where a list of identifiers is expected.

    Iterating ``"users.read"`` would test one-character identifiers, so the
    call fails instead of answering.
    """

    default_code = "requirement_type"

    def __init__(self, argument: str, value: str) -> None:
        super().__init__(
            f"{argument} must be a list of identifiers, not a string ({value!r})",
            argument=argument,
            value=value,
        )
        self.argument = argument
        self.value = value


__all__ = ["ProviderScopeError", "RequirementTypeError"]
