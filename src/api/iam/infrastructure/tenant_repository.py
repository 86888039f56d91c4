"""PostgreSQL implementation of ITenantRepository.

This repository manages tenant metadata storage in PostgreSQL. The unique
index on the name column is the final authority on name uniqueness: a
violation raised at flush time surfaces as DuplicateTenantNameError.
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from iam.domain.aggregates import Tenant
from iam.domain.value_objects import TenantId, TenantStatus
from iam.infrastructure.models import TenantModel
from iam.infrastructure.observability import (
    DefaultTenantRepositoryProbe,
    TenantRepositoryProbe,
)
from iam.ports.exceptions import DuplicateTenantNameError
from iam.ports.repositories import ITenantRepository
from infrastructure.database.models import ensure_utc

# PostgreSQL reports the index name, SQLite the column.
_NAME_CONSTRAINT_MARKERS = ("ix_tenants_name", "tenants.name")


class TenantRepository(ITenantRepository):
    """Repository managing PostgreSQL storage for Tenant aggregates.

    Domain events stay on the aggregate; the application service collects
    and publishes them once the transaction has committed.
    """

    def __init__(
        self,
        session: AsyncSession,
        probe: TenantRepositoryProbe | None = None,
    ) -> None:
        """Initialize repository with database session.

        Args:
            session: AsyncSession from FastAPI dependency injection
            probe: Optional domain probe for observability
        """
        self._session = session
        self._probe = probe or DefaultTenantRepositoryProbe()

    async def save(self, tenant: Tenant) -> None:
        """Persist tenant metadata to PostgreSQL.

        Args:
            tenant: The Tenant aggregate to persist

        Raises:
            DuplicateTenantNameError: If tenant name already exists
        """
        try:
            stmt = select(TenantModel).where(TenantModel.id == str(tenant.id))
            result = await self._session.execute(stmt)
            model = result.scalar_one_or_none()

            if model:
                model.name = tenant.name
                model.status = tenant.status.value
            else:
                model = TenantModel(
                    id=str(tenant.id),
                    name=tenant.name,
                    status=tenant.status.value,
                    creation_date=tenant.creation_date,
                )
                self._session.add(model)

            # Flush so the unique index is checked here, not at commit
            await self._session.flush()

        except IntegrityError as e:
            if any(marker in str(e) for marker in _NAME_CONSTRAINT_MARKERS):
                self._probe.duplicate_tenant_name(tenant.name)
                raise DuplicateTenantNameError(
                    f"Tenant '{tenant.name}' already exists"
                ) from e
            raise

        self._probe.tenant_saved(str(tenant.id))

    async def get_by_id(self, tenant_id: TenantId) -> Tenant | None:
        """Fetch tenant metadata from PostgreSQL.

        Args:
            tenant_id: The unique identifier of the tenant

        Returns:
            The Tenant aggregate, or None if not found
        """
        stmt = select(TenantModel).where(TenantModel.id == str(tenant_id))
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        tenant = self._to_domain(model)
        self._probe.tenant_retrieved(model.id)
        return tenant

    async def exists_by_name(self, name: str) -> bool:
        """Check whether a tenant row holds this exact name.

        Args:
            name: The tenant name

        Returns:
            True if a tenant already holds the name
        """
        stmt = select(TenantModel.id).where(TenantModel.name == name).limit(1)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None

    @staticmethod
    def _to_domain(model: TenantModel) -> Tenant:
        # Constructed directly: rehydration records no events.
        return Tenant(
            id=TenantId.from_string(model.id),
            name=model.name,
            status=TenantStatus[model.status],
            creation_date=ensure_utc(model.creation_date),
        )
