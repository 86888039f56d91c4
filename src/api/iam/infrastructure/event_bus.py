"""In-process implementation of IEventSink.

Delivers domain events to subscribers registered in the same process.
Nothing is queued or persisted: publish() runs every handler before it
returns.
"""

from __future__ import annotations

import inspect
from collections import defaultdict
from collections.abc import Awaitable, Callable
from typing import Any

from iam.domain.events import DomainEvent
from iam.infrastructure.observability import DefaultEventBusProbe, EventBusProbe
from iam.ports.events import IEventSink

EventHandler = Callable[[Any], Awaitable[None] | None]


def _handler_name(handler: EventHandler) -> str:
    return getattr(handler, "__qualname__", type(handler).__qualname__)


class InProcessEventBus(IEventSink):
    """Type-keyed, in-order event dispatcher.

    Handlers may be plain callables or coroutine functions. They run one
    after another in subscription order. A handler that raises stops the
    dispatch and the exception reaches the publisher.
    """

    def __init__(self, probe: EventBusProbe | None = None) -> None:
        self._handlers: dict[type, list[EventHandler]] = defaultdict(list)
        self._probe = probe or DefaultEventBusProbe()

    def subscribe(self, event_type: type, handler: EventHandler) -> None:
        """Register a handler for one event type.

        Subscribing a handler that is already registered for the type does
        nothing.

        Args:
            event_type: Exact event class to listen for
            handler: Callable receiving the event; may return an awaitable
        """
        handlers = self._handlers[event_type]
        if handler in handlers:
            return
        handlers.append(handler)
        self._probe.handler_subscribed(
            event_type=event_type.__name__, handler=_handler_name(handler)
        )

    def unsubscribe(self, event_type: type, handler: EventHandler) -> None:
        """Remove a handler. Unknown handlers are ignored."""
        handlers = self._handlers.get(event_type)
        if not handlers or handler not in handlers:
            return
        handlers.remove(handler)
        self._probe.handler_unsubscribed(
            event_type=event_type.__name__, handler=_handler_name(handler)
        )

    async def publish(self, event: DomainEvent) -> None:
        """Deliver an event to every subscriber of its type.

        Raises:
            Exception: Whatever a failing handler raised
        """
        event_type = type(event)
        handlers = list(self._handlers.get(event_type, ()))

        for handler in handlers:
            try:
                result = handler(event)
                if inspect.isawaitable(result):
                    await result
            except Exception as e:
                self._probe.handler_failed(
                    event_type=event_type.__name__,
                    handler=_handler_name(handler),
                    error=str(e),
                )
                raise

        self._probe.event_dispatched(
            event_type=event_type.__name__, handler_count=len(handlers)
        )
