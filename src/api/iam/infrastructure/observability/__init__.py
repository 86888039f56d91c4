"""Domain-Oriented Observability for IAM infrastructure.

Probes for repository, identity provider and event bus operations
following Domain-Oriented Observability patterns.
"""

from iam.infrastructure.observability.event_bus_probe import (
    DefaultEventBusProbe,
    EventBusProbe,
)
from iam.infrastructure.observability.identity_provider_probe import (
    DefaultIdentityProviderProbe,
    IdentityProviderProbe,
)
from iam.infrastructure.observability.repository_probe import (
    DefaultTenantRepositoryProbe,
    DefaultUserRepositoryProbe,
    TenantRepositoryProbe,
    UserRepositoryProbe,
)

__all__ = [
    "EventBusProbe",
    "DefaultEventBusProbe",
    "IdentityProviderProbe",
    "DefaultIdentityProviderProbe",
    "UserRepositoryProbe",
    "DefaultUserRepositoryProbe",
    "TenantRepositoryProbe",
    "DefaultTenantRepositoryProbe",
]
