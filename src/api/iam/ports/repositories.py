"""Repository protocols (ports) for IAM bounded context.

Repository protocols define the interface for persisting and retrieving
aggregates. Implementations map aggregates to storage and back, and are
the final authority on tenant name and user email uniqueness.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from iam.domain.aggregates import Tenant, User
from iam.domain.value_objects import Email, TenantId, UserId


@runtime_checkable
class ITenantRepository(Protocol):
    """Repository for Tenant aggregate persistence.

    Simple repository for tenant metadata. Tenants represent organizations
    and are the top-level isolation boundary in the system.
    """

    async def save(self, tenant: Tenant) -> None:
        """Persist a tenant aggregate.

        Creates a new tenant or updates an existing one.

        Args:
            tenant: The Tenant aggregate to persist

        Raises:
            DuplicateTenantNameError: If another tenant already holds this name
        """
        ...

    async def get_by_id(self, tenant_id: TenantId) -> Tenant | None:
        """Retrieve a tenant by its ID.

        Args:
            tenant_id: The unique identifier of the tenant

        Returns:
            The Tenant aggregate, or None if not found
        """
        ...

    async def exists_by_name(self, name: str) -> bool:
        """Check whether a tenant with this name has been persisted.

        Names match exactly, including case, as the unique index on
        tenants.name does.

        Args:
            name: The tenant name

        Returns:
            True if a tenant already holds the name
        """
        ...


@runtime_checkable
class IUserRepository(Protocol):
    """Repository for User aggregate persistence.

    Saving flattens the user's membership map; loading rehydrates it so
    that every tenant maps to the same role set that was saved.
    """

    async def save(self, user: User) -> None:
        """Persist a user aggregate together with its memberships.

        Args:
            user: The User aggregate to persist

        Raises:
            DuplicateEmailError: If another user already holds this email
        """
        ...

    async def get_by_id(self, user_id: UserId) -> User | None:
        """Retrieve a user by their ID.

        Args:
            user_id: The unique identifier of the user

        Returns:
            The User aggregate, or None if not found
        """
        ...

    async def get_by_email(self, email: Email) -> User | None:
        """Retrieve a user by their email.

        Args:
            email: The email to search for

        Returns:
            The User aggregate, or None if not found
        """
        ...
