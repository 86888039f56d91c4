"""Event sink port for IAM bounded context."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from iam.domain.events import DomainEvent


@runtime_checkable
class IEventSink(Protocol):
    """Local, synchronous notification of domain events.

    publish() returns only after every subscriber has run. There is no
    durable queue behind it: an event is lost if the process dies between
    commit and publish.
    """

    async def publish(self, event: DomainEvent) -> None:
        """Deliver an event to all subscribers of its type.

        Args:
            event: The domain event to deliver
        """
        ...
