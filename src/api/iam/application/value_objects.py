"""Application-layer value objects for IAM bounded context.

These are read-only view objects returned by application and query
services. They are projections, not domain concepts: they carry plain
strings so callers never receive a live aggregate.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from iam.domain.aggregates import Tenant, User


@dataclass(frozen=True)
class TenantSummary:
    """Projection of a persisted tenant returned by registration."""

    id: str
    name: str
    status: str
    creation_date: datetime

    @classmethod
    def from_domain(cls, tenant: Tenant) -> TenantSummary:
        """Project a Tenant aggregate.

        Args:
            tenant: Tenant domain aggregate

        Returns:
            TenantSummary
        """
        return cls(
            id=str(tenant.id),
            name=tenant.name,
            status=tenant.status.value,
            creation_date=tenant.creation_date,
        )


@dataclass(frozen=True)
class UserSummary:
    """Projection of a persisted user returned by registration."""

    id: str
    email: str
    external_id: str

    @classmethod
    def from_domain(cls, user: User) -> UserSummary:
        return cls(
            id=str(user.id),
            email=user.email.value,
            external_id=user.external_id,
        )


@dataclass(frozen=True)
class MemberView:
    """A tenant member as seen by the tenant details query.

    Attributes:
        email: The member's email
        roles: Role names held in the tenant, in stored order
    """

    email: str
    roles: tuple[str, ...]


@dataclass(frozen=True)
class TenantDetails:
    """Read model for a tenant together with its members."""

    id: str
    name: str
    status: str
    creation_date: datetime
    members: tuple[MemberView, ...]
