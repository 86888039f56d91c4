"""Protocol for user application service observability.

Defines the interface for domain probes that capture application-level
domain events for user service operations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class UserServiceProbe(Protocol):
    """Domain probe for user application service operations."""

    def user_registered(self, user_id: str, email: str, external_id: str) -> None:
        """Record that a user was registered."""
        ...

    def duplicate_email(self, email: str) -> None:
        """Record that a registration was refused for an email already in use."""
        ...

    def identity_provider_failed(self, email: str, error: str) -> None:
        """Record that the identity provider refused or failed a registration."""
        ...

    def user_registration_orphaned(
        self, email: str, external_id: str, error: str
    ) -> None:
        """Record that the provider holds an identity the local store failed to save."""
        ...

    def user_invited(self, tenant_id: str, user_id: str, role: str) -> None:
        """Record that a user was granted a role in a tenant."""
        ...

    def tenant_not_found(self, tenant_id: str) -> None:
        """Record that an invitation referenced a missing tenant."""
        ...

    def user_not_found(self, email: str) -> None:
        """Record that an invitation referenced an unknown email."""
        ...

    def with_context(self, context: ObservationContext) -> UserServiceProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultUserServiceProbe:
    """Default implementation of UserServiceProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultUserServiceProbe:
        """Create a new probe with observation context bound."""
        return DefaultUserServiceProbe(logger=self._logger, context=context)

    def user_registered(self, user_id: str, email: str, external_id: str) -> None:
        """Record that a user was registered."""
        self._logger.info(
            "user_registered",
            user_id=user_id,
            email=email,
            external_id=external_id,
            **self._get_context_kwargs(),
        )

    def duplicate_email(self, email: str) -> None:
        """Record that a registration was refused for an email already in use."""
        self._logger.warning(
            "duplicate_email",
            email=email,
            **self._get_context_kwargs(),
        )

    def identity_provider_failed(self, email: str, error: str) -> None:
        """Record that the identity provider refused or failed a registration."""
        self._logger.error(
            "identity_provider_failed",
            email=email,
            error=error,
            **self._get_context_kwargs(),
        )

    def user_registration_orphaned(
        self, email: str, external_id: str, error: str
    ) -> None:
        """Record that the provider holds an identity the local store failed to save."""
        self._logger.error(
            "user_registration_orphaned",
            email=email,
            external_id=external_id,
            error=error,
            **self._get_context_kwargs(),
        )

    def user_invited(self, tenant_id: str, user_id: str, role: str) -> None:
        """Record that a user was granted a role in a tenant."""
        self._logger.info(
            "user_invited",
            tenant_id=tenant_id,
            user_id=user_id,
            role=role,
            **self._get_context_kwargs(),
        )

    def tenant_not_found(self, tenant_id: str) -> None:
        """Record that an invitation referenced a missing tenant."""
        self._logger.debug(
            "tenant_not_found",
            tenant_id=tenant_id,
            **self._get_context_kwargs(),
        )

    def user_not_found(self, email: str) -> None:
        """Record that an invitation referenced an unknown email."""
        self._logger.debug(
            "user_not_found",
            email=email,
            **self._get_context_kwargs(),
        )
