"""Domain events for IAM bounded context.

Domain events capture facts about things that have happened in the domain.
They are immutable value objects that carry all the information needed
to describe the occurrence of an event.

Events are recorded by aggregates, collected by application services and
handed to the local event sink after the owning transaction commits.
"""

from iam.domain.events.tenant import TenantRegistered

# Type alias for all domain events in the IAM context
DomainEvent = TenantRegistered

__all__ = [
    "TenantRegistered",
    "DomainEvent",
]
