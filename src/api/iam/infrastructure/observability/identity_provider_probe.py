"""Domain probe for identity provider calls."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class IdentityProviderProbe(Protocol):
    """Domain probe for calls to the external identity provider."""

    def admin_token_failed(self, status_code: int | None, error: str) -> None:
        """Record that the admin token could not be obtained."""
        ...

    def identity_created(self, username: str, external_id: str) -> None:
        """Record that the provider created an identity."""
        ...

    def identity_rejected(self, username: str, status_code: int) -> None:
        """Record that the provider refused to create an identity."""
        ...

    def provider_unreachable(self, url: str, error: str) -> None:
        """Record a transport-level failure talking to the provider."""
        ...

    def with_context(self, context: ObservationContext) -> IdentityProviderProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultIdentityProviderProbe:
    """Default implementation of IdentityProviderProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultIdentityProviderProbe:
        """Create a new probe with observation context bound."""
        return DefaultIdentityProviderProbe(logger=self._logger, context=context)

    def admin_token_failed(self, status_code: int | None, error: str) -> None:
        self._logger.error(
            "identity_provider_admin_token_failed",
            status_code=status_code,
            error=error,
            **self._get_context_kwargs(),
        )

    def identity_created(self, username: str, external_id: str) -> None:
        self._logger.info(
            "identity_provider_identity_created",
            username=username,
            external_id=external_id,
            **self._get_context_kwargs(),
        )

    def identity_rejected(self, username: str, status_code: int) -> None:
        self._logger.warning(
            "identity_provider_identity_rejected",
            username=username,
            status_code=status_code,
            **self._get_context_kwargs(),
        )

    def provider_unreachable(self, url: str, error: str) -> None:
        self._logger.error(
            "identity_provider_unreachable",
            url=url,
            error=error,
            **self._get_context_kwargs(),
        )
