"""Domain probe for application startup and shutdown."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class StartupProbe(Protocol):
    """Domain probe for application lifecycle events."""

    def application_starting(self, app_name: str) -> None:
        """Record that the application is starting."""
        ...

    def event_listener_registered(self, event_type: str, listener: str) -> None:
        """Record that an event listener was wired at startup."""
        ...

    def application_stopped(self) -> None:
        """Record that shutdown finished and resources were released."""
        ...

    def with_context(self, context: ObservationContext) -> StartupProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultStartupProbe:
    """Default implementation of StartupProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultStartupProbe:
        """Create a new probe with observation context bound."""
        return DefaultStartupProbe(logger=self._logger, context=context)

    def application_starting(self, app_name: str) -> None:
        self._logger.info(
            "application_starting",
            app_name=app_name,
            **self._get_context_kwargs(),
        )

    def event_listener_registered(self, event_type: str, listener: str) -> None:
        self._logger.info(
            "event_listener_registered",
            event_type=event_type,
            listener=listener,
            **self._get_context_kwargs(),
        )

    def application_stopped(self) -> None:
        self._logger.info(
            "application_stopped",
            **self._get_context_kwargs(),
        )
