"""Ports (interfaces) for IAM bounded context.

Ports define the contracts for repositories and external collaborators
without specifying implementation details. This allows for dependency
inversion and makes the domain layer independent of infrastructure.
"""

from iam.ports.events import IEventSink
from iam.ports.exceptions import (
    ConflictError,
    DuplicateEmailError,
    DuplicateTenantNameError,
    ExternalProviderError,
    NotFoundError,
    TenantNotFoundError,
    UserNotFoundError,
)
from iam.ports.identity_provider import IIdentityProvider
from iam.ports.read_models import ITenantReadModel, MembershipRow, TenantRow
from iam.ports.repositories import ITenantRepository, IUserRepository

__all__ = [
    "IEventSink",
    "IIdentityProvider",
    "ITenantReadModel",
    "ITenantRepository",
    "IUserRepository",
    "MembershipRow",
    "TenantRow",
    "ConflictError",
    "DuplicateEmailError",
    "DuplicateTenantNameError",
    "ExternalProviderError",
    "NotFoundError",
    "TenantNotFoundError",
    "UserNotFoundError",
]
