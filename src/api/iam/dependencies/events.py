"""Event bus wiring.

One bus per process: listeners subscribed at startup must see events
published by every request.
"""

from functools import lru_cache

from iam.infrastructure.event_bus import InProcessEventBus


@lru_cache
def get_event_bus() -> InProcessEventBus:
    """Get the application-scoped event bus (singleton).

    Returns:
        InProcessEventBus shared by all requests
    """
    return InProcessEventBus()
