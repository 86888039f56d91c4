"""Tenant query service for IAM bounded context.

Read-side service that assembles tenant details straight from persisted
rows without rebuilding aggregates.
"""

from __future__ import annotations

from iam.application.observability import (
    DefaultTenantQueryServiceProbe,
    TenantQueryServiceProbe,
)
from iam.application.value_objects import MemberView, TenantDetails
from iam.domain.role_codec import split_role_names
from iam.domain.value_objects import TenantId
from iam.ports.exceptions import TenantNotFoundError
from iam.ports.read_models import ITenantReadModel


class TenantQueryService:
    """Query service for tenant details."""

    def __init__(
        self,
        read_model: ITenantReadModel,
        probe: TenantQueryServiceProbe | None = None,
    ):
        self._read_model = read_model
        self._probe = probe or DefaultTenantQueryServiceProbe()

    async def get_tenant_details(self, tenant_id: str) -> TenantDetails:
        """Load a tenant and its members.

        Each member is listed once. Should storage hold more than one
        membership row for the same user, the first row wins.

        Args:
            tenant_id: Tenant id (UUID string)

        Returns:
            TenantDetails with one MemberView per member

        Raises:
            ValidationError: If the tenant id is malformed
            TenantNotFoundError: If the tenant does not exist
        """
        tid = TenantId.from_string(tenant_id)

        row = await self._read_model.get_tenant_row(tid)
        if row is None:
            self._probe.tenant_not_found(tenant_id=tenant_id)
            raise TenantNotFoundError(f"Tenant {tenant_id} not found")

        members: dict[str, MemberView] = {}
        for membership in await self._read_model.list_membership_rows(tid):
            if membership.user_email in members:
                self._probe.duplicate_membership_rows(
                    tenant_id=row.id, email=membership.user_email
                )
                continue
            members[membership.user_email] = MemberView(
                email=membership.user_email,
                roles=split_role_names(membership.roles),
            )

        self._probe.tenant_details_retrieved(
            tenant_id=row.id, member_count=len(members)
        )
        return TenantDetails(
            id=row.id,
            name=row.name,
            status=row.status,
            creation_date=row.creation_date,
            members=tuple(members.values()),
        )
