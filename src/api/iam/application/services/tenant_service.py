"""Tenant application service for IAM bounded context.

Handles tenant registration and publishes the resulting domain events.
"""

from __future__ import annotations

from iam.application.observability import DefaultTenantServiceProbe, TenantServiceProbe
from iam.application.value_objects import TenantSummary
from iam.domain.aggregates import Tenant
from iam.domain.value_objects import Email, TenantId
from iam.ports.events import IEventSink
from iam.ports.exceptions import DuplicateTenantNameError
from iam.ports.repositories import ITenantRepository
from sqlalchemy.ext.asyncio import AsyncSession


class TenantService:
    """Application service for tenant management.

    Registration runs inside a single transaction. Events recorded by the
    aggregate are handed to the event sink only after that transaction
    commits, so subscribers never see a tenant that was rolled back.
    """

    def __init__(
        self,
        tenant_repository: ITenantRepository,
        event_sink: IEventSink,
        session: AsyncSession,
        probe: TenantServiceProbe | None = None,
    ):
        """Initialize TenantService with dependencies.

        Args:
            tenant_repository: Repository for tenant persistence
            event_sink: Local sink receiving committed domain events
            session: Database session for transaction management
            probe: Optional domain probe for observability
        """
        self._tenant_repository = tenant_repository
        self._event_sink = event_sink
        self._probe = probe or DefaultTenantServiceProbe()
        self._session = session

    async def register_tenant(
        self, name: str, contact_email: str | None = None
    ) -> TenantSummary:
        """Register a new tenant.

        Args:
            name: The name of the tenant
            contact_email: Optional contact address, validated and logged only

        Returns:
            Projection of the registered tenant

        Raises:
            ValidationError: If the name is blank or the contact email is malformed
            DuplicateTenantNameError: If a tenant with this name already exists
        """
        contact = Email(contact_email) if contact_email is not None else None

        async with self._session.begin():
            try:
                if await self._tenant_repository.exists_by_name(name):
                    raise DuplicateTenantNameError(
                        f"Tenant with name '{name}' already exists"
                    )

                tenant = Tenant.register(tenant_id=TenantId.generate(), name=name)
                await self._tenant_repository.save(tenant)

            except DuplicateTenantNameError:
                self._probe.duplicate_tenant_name(name=name)
                raise

        self._probe.tenant_registered(
            tenant_id=str(tenant.id),
            name=tenant.name,
            contact_email=contact.value if contact else None,
        )

        for event in tenant.collect_events():
            await self._event_sink.publish(event)
            self._probe.tenant_event_published(
                tenant_id=str(tenant.id),
                event_type=type(event).__name__,
            )

        return TenantSummary.from_domain(tenant)
