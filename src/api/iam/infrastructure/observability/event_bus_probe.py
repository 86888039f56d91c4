"""Domain probe for the in-process event bus."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class EventBusProbe(Protocol):
    """Domain probe for local event delivery."""

    def handler_subscribed(self, event_type: str, handler: str) -> None:
        """Record that a handler was subscribed to an event type."""
        ...

    def handler_unsubscribed(self, event_type: str, handler: str) -> None:
        """Record that a handler was removed from an event type."""
        ...

    def event_dispatched(self, event_type: str, handler_count: int) -> None:
        """Record that an event was delivered to every subscriber."""
        ...

    def handler_failed(self, event_type: str, handler: str, error: str) -> None:
        """Record that a subscriber raised while handling an event."""
        ...

    def with_context(self, context: ObservationContext) -> EventBusProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultEventBusProbe:
    """Default implementation of EventBusProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultEventBusProbe:
        """Create a new probe with observation context bound."""
        return DefaultEventBusProbe(logger=self._logger, context=context)

    def handler_subscribed(self, event_type: str, handler: str) -> None:
        self._logger.debug(
            "event_handler_subscribed",
            event_type=event_type,
            handler=handler,
            **self._get_context_kwargs(),
        )

    def handler_unsubscribed(self, event_type: str, handler: str) -> None:
        self._logger.debug(
            "event_handler_unsubscribed",
            event_type=event_type,
            handler=handler,
            **self._get_context_kwargs(),
        )

    def event_dispatched(self, event_type: str, handler_count: int) -> None:
        self._logger.debug(
            "event_dispatched",
            event_type=event_type,
            handler_count=handler_count,
            **self._get_context_kwargs(),
        )

    def handler_failed(self, event_type: str, handler: str, error: str) -> None:
        self._logger.error(
            "event_handler_failed",
            event_type=event_type,
            handler=handler,
            error=error,
            **self._get_context_kwargs(),
        )
