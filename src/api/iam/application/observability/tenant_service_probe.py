"""Protocol for tenant application service observability.

Defines the interface for domain probes that capture application-level
domain events for tenant service operations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class TenantServiceProbe(Protocol):
    """Domain probe for tenant application service operations."""

    def tenant_registered(
        self, tenant_id: str, name: str, contact_email: str | None
    ) -> None:
        """Record that a tenant was registered."""
        ...

    def duplicate_tenant_name(self, name: str) -> None:
        """Record that a duplicate tenant name was detected."""
        ...

    def tenant_event_published(self, tenant_id: str, event_type: str) -> None:
        """Record that a tenant domain event was handed to the event sink."""
        ...

    def with_context(self, context: ObservationContext) -> TenantServiceProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultTenantServiceProbe:
    """Default implementation of TenantServiceProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultTenantServiceProbe:
        """Create a new probe with observation context bound."""
        return DefaultTenantServiceProbe(logger=self._logger, context=context)

    def tenant_registered(
        self, tenant_id: str, name: str, contact_email: str | None
    ) -> None:
        """Record that a tenant was registered."""
        self._logger.info(
            "tenant_registered",
            tenant_id=tenant_id,
            name=name,
            contact_email=contact_email,
            **self._get_context_kwargs(),
        )

    def duplicate_tenant_name(self, name: str) -> None:
        """Record that a duplicate tenant name was detected."""
        self._logger.warning(
            "duplicate_tenant_name",
            name=name,
            **self._get_context_kwargs(),
        )

    def tenant_event_published(self, tenant_id: str, event_type: str) -> None:
        """Record that a tenant domain event was handed to the event sink."""
        self._logger.debug(
            "tenant_event_published",
            tenant_id=tenant_id,
            event_type=event_type,
            **self._get_context_kwargs(),
        )
