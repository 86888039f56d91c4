"""In-memory implementations of the IAM repository and read-model ports.

Dict-backed adapters used by tests and local wiring. They apply the same
uniqueness rules as the relational schema and raise the same conflict
errors. Aggregates are copied on the way in and out, so a caller mutating
a loaded aggregate changes nothing until it saves again.
"""

from __future__ import annotations

import copy

from iam.domain.aggregates import Tenant, User
from iam.domain.role_codec import encode_roles
from iam.domain.value_objects import Email, TenantId, UserId
from iam.ports.exceptions import DuplicateEmailError, DuplicateTenantNameError
from iam.ports.read_models import ITenantReadModel, MembershipRow, TenantRow
from iam.ports.repositories import ITenantRepository, IUserRepository


class InMemoryTenantRepository(ITenantRepository):
    """Tenant storage keyed by id, with exact-match name uniqueness."""

    def __init__(self) -> None:
        self._tenants: dict[TenantId, Tenant] = {}

    async def save(self, tenant: Tenant) -> None:
        for stored in self._tenants.values():
            if stored.id != tenant.id and stored.name == tenant.name:
                raise DuplicateTenantNameError(
                    f"Tenant '{tenant.name}' already exists"
                )

        snapshot = copy.deepcopy(tenant)
        snapshot.collect_events()
        self._tenants[tenant.id] = snapshot

    async def get_by_id(self, tenant_id: TenantId) -> Tenant | None:
        stored = self._tenants.get(tenant_id)
        return copy.deepcopy(stored) if stored is not None else None

    async def exists_by_name(self, name: str) -> bool:
        return any(t.name == name for t in self._tenants.values())

    def list_all(self) -> list[Tenant]:
        """Copies of every stored tenant, in insertion order."""
        return [copy.deepcopy(t) for t in self._tenants.values()]


class InMemoryUserRepository(IUserRepository):
    """User storage keyed by id, with exact-match email uniqueness."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def save(self, user: User) -> None:
        for stored in self._users.values():
            if stored.id != user.id and stored.email == user.email:
                raise DuplicateEmailError(
                    f"User with email '{user.email.value}' already exists"
                )

        self._users[user.id] = copy.deepcopy(user)

    async def get_by_id(self, user_id: UserId) -> User | None:
        stored = self._users.get(user_id)
        return copy.deepcopy(stored) if stored is not None else None

    async def get_by_email(self, email: Email) -> User | None:
        for stored in self._users.values():
            if stored.email == email:
                return copy.deepcopy(stored)
        return None

    def list_all(self) -> list[User]:
        """Copies of every stored user, in insertion order."""
        return [copy.deepcopy(u) for u in self._users.values()]


class InMemoryTenantReadModel(ITenantReadModel):
    """Projects rows out of the in-memory repositories.

    Membership rows carry the same joined role string the relational
    adapter would store.
    """

    def __init__(
        self,
        tenant_repository: InMemoryTenantRepository,
        user_repository: InMemoryUserRepository,
    ) -> None:
        self._tenants = tenant_repository
        self._users = user_repository

    async def get_tenant_row(self, tenant_id: TenantId) -> TenantRow | None:
        tenant = await self._tenants.get_by_id(tenant_id)
        if tenant is None:
            return None
        return TenantRow(
            id=str(tenant.id),
            name=tenant.name,
            status=tenant.status.value,
            creation_date=tenant.creation_date,
        )

    async def list_membership_rows(self, tenant_id: TenantId) -> list[MembershipRow]:
        return [
            MembershipRow(
                user_email=user.email.value,
                tenant_id=str(tenant_id),
                roles=encode_roles(user.roles_for_tenant(tenant_id)),
            )
            for user in self._users.list_all()
            if user.is_member_of(tenant_id)
        ]
