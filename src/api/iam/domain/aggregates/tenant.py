"""Tenant aggregate for IAM context."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from iam.domain.events import TenantRegistered
from iam.domain.exceptions import ValidationError
from iam.domain.value_objects import TenantId, TenantStatus

if TYPE_CHECKING:
    from iam.domain.events import DomainEvent


@dataclass
class Tenant:
    """Tenant aggregate representing an organization in the system.

    Tenants are the top-level isolation boundary in the system.
    Users join a tenant through a membership held on the User aggregate;
    the tenant itself only owns its lifecycle state.

    Business rules:
    - Tenant names must be non-blank and globally unique (uniqueness is
      enforced by the application service and the storage layer)
    - Registration always yields an ACTIVE tenant
    - Status only moves between ACTIVE and SUSPENDED; PENDING is never produced
    - creation_date is fixed at registration

    Event collection:
    - register() records a TenantRegistered event
    - Events can be collected via collect_events() after persistence
    """

    id: TenantId
    name: str
    status: TenantStatus
    creation_date: datetime
    _pending_events: list[DomainEvent] = field(default_factory=list, repr=False)

    @classmethod
    def register(cls, tenant_id: TenantId, name: str | None) -> Tenant:
        """Factory method for registering a new tenant.

        Args:
            tenant_id: Identifier generated by the caller
            name: The name of the tenant

        Returns:
            A new ACTIVE Tenant with a TenantRegistered event recorded

        Raises:
            ValidationError: If the name is None or blank
        """
        if name is None or not name.strip():
            raise ValidationError("Tenant name cannot be empty")

        now = datetime.now(UTC)
        tenant = cls(
            id=tenant_id,
            name=name,
            status=TenantStatus.ACTIVE,
            creation_date=now,
        )
        tenant._pending_events.append(
            TenantRegistered(
                tenant_id=str(tenant_id),
                name=name,
                occurred_on=now,
            )
        )
        return tenant

    def activate(self) -> None:
        """Move the tenant to ACTIVE. Does nothing if it already is."""
        if self.status == TenantStatus.ACTIVE:
            return
        self.status = TenantStatus.ACTIVE

    def suspend(self) -> None:
        """Move the tenant to SUSPENDED."""
        self.status = TenantStatus.SUSPENDED

    @property
    def is_active(self) -> bool:
        """Whether the tenant is currently ACTIVE."""
        return self.status == TenantStatus.ACTIVE

    def collect_events(self) -> list[DomainEvent]:
        """Return and clear pending domain events.

        This method returns all domain events that have been recorded since
        the last call to collect_events(). It clears the internal list, so
        subsequent calls will return an empty list until new events are recorded.

        Returns:
            List of pending domain events
        """
        events = self._pending_events.copy()
        self._pending_events.clear()
        return events
