"""Read-side ports for IAM bounded context.

The query service reads persisted rows directly through these ports and
never reconstructs aggregates.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol, runtime_checkable

from iam.domain.value_objects import TenantId


@dataclass(frozen=True)
class TenantRow:
    """Flat projection of a persisted tenant."""

    id: str
    name: str
    status: str
    creation_date: datetime


@dataclass(frozen=True)
class MembershipRow:
    """Flat projection of one persisted membership.

    Attributes:
        user_email: Email of the member
        tenant_id: Tenant the membership belongs to
        roles: Role names joined with ROLE_SEPARATOR, as stored
    """

    user_email: str
    tenant_id: str
    roles: str


@runtime_checkable
class ITenantReadModel(Protocol):
    """Row source for tenant detail queries."""

    async def get_tenant_row(self, tenant_id: TenantId) -> TenantRow | None:
        """Load the tenant row, or None if it does not exist."""
        ...

    async def list_membership_rows(self, tenant_id: TenantId) -> list[MembershipRow]:
        """Load every membership row referencing the tenant."""
        ...
