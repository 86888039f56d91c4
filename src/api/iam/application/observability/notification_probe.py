"""Protocol for tenant notification observability.

Probe used by event listeners that notify people about tenant lifecycle
events (welcome emails and the like).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class NotificationProbe(Protocol):
    """Domain probe for tenant notifications."""

    def welcome_email_requested(self, tenant_id: str, tenant_name: str) -> None:
        """Record that a welcome email was requested for a new tenant."""
        ...

    def with_context(self, context: ObservationContext) -> NotificationProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultNotificationProbe:
    """Default implementation of NotificationProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultNotificationProbe:
        """Create a new probe with observation context bound."""
        return DefaultNotificationProbe(logger=self._logger, context=context)

    def welcome_email_requested(self, tenant_id: str, tenant_name: str) -> None:
        self._logger.info(
            "welcome_email_requested",
            tenant_id=tenant_id,
            tenant_name=tenant_name,
            **self._get_context_kwargs(),
        )
