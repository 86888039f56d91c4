"""SQL implementation of ITenantReadModel.

Reads tenant and membership rows directly, without loading aggregates.
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from iam.domain.value_objects import TenantId
from iam.infrastructure.models import TenantModel, UserMembershipModel, UserModel
from iam.ports.read_models import ITenantReadModel, MembershipRow, TenantRow
from infrastructure.database.models import ensure_utc


class SqlTenantReadModel(ITenantReadModel):
    """Row source over the tenants, users and user_memberships tables."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_tenant_row(self, tenant_id: TenantId) -> TenantRow | None:
        stmt = select(TenantModel).where(TenantModel.id == str(tenant_id))
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return TenantRow(
            id=model.id,
            name=model.name,
            status=model.status,
            creation_date=ensure_utc(model.creation_date),
        )

    async def list_membership_rows(self, tenant_id: TenantId) -> list[MembershipRow]:
        """Join memberships to their users for one tenant.

        Rows come back in insertion order.
        """
        stmt = (
            select(
                UserModel.email,
                UserMembershipModel.tenant_id,
                UserMembershipModel.roles,
            )
            .join(UserModel, UserMembershipModel.user_id == UserModel.id)
            .where(UserMembershipModel.tenant_id == str(tenant_id))
            .order_by(UserMembershipModel.created_at, UserMembershipModel.id)
        )
        result = await self._session.execute(stmt)
        return [
            MembershipRow(user_email=email, tenant_id=tid, roles=roles)
            for email, tid, roles in result.all()
        ]
