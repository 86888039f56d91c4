"""User aggregate for IAM context."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from iam.domain.exceptions import ValidationError
from iam.domain.value_objects import Email, Role, TenantId, UserId


class TenantMembership:
    """A user's membership in one tenant, carrying a set of roles.

    Owned exclusively by the User aggregate. Roles are only ever added.
    """

    def __init__(self, tenant_id: TenantId, initial_role: Role) -> None:
        self._tenant_id = tenant_id
        self._roles: set[Role] = {initial_role}

    @property
    def tenant_id(self) -> TenantId:
        return self._tenant_id

    @property
    def roles(self) -> frozenset[Role]:
        """Snapshot of the roles held in this tenant."""
        return frozenset(self._roles)

    def add_role(self, role: Role) -> None:
        self._roles.add(role)

    def __repr__(self) -> str:
        names = sorted(r.name for r in self._roles)
        return f"TenantMembership(tenant_id={self._tenant_id}, roles={names})"


class User:
    """User aggregate representing a person in the system.

    Credentials live with the external identity provider; the user only
    keeps the opaque reference the provider handed back at registration.

    Business rules:
    - external_id and email are fixed at registration
    - At most one membership per tenant; roles within it form a set
    - Roles and memberships are only ever added, never removed
    - No checks against other aggregates happen here (the application
      service owns existence and uniqueness checks)
    """

    def __init__(self, id: UserId, external_id: str, email: Email) -> None:
        if external_id is None or not external_id.strip():
            raise ValidationError("External identity reference cannot be empty")
        self._id = id
        self._external_id = external_id
        self._email = email
        self._memberships: dict[TenantId, TenantMembership] = {}

    @classmethod
    def register(cls, user_id: UserId, external_id: str, email: Email) -> User:
        """Factory method for registering a new user.

        Args:
            user_id: Identifier generated by the caller
            external_id: Reference returned by the external identity provider
            email: The user's email address

        Returns:
            A new User with no tenant memberships
        """
        return cls(id=user_id, external_id=external_id, email=email)

    @property
    def id(self) -> UserId:
        return self._id

    @property
    def external_id(self) -> str:
        return self._external_id

    @property
    def email(self) -> Email:
        return self._email

    @property
    def memberships(self) -> Mapping[TenantId, frozenset[Role]]:
        """Read-only snapshot of tenant -> roles."""
        return MappingProxyType(
            {tid: m.roles for tid, m in self._memberships.items()}
        )

    def add_to_tenant(self, tenant_id: TenantId, role: Role) -> None:
        """Grant a role in a tenant, creating the membership if needed.

        Granting a role the user already holds in that tenant is a no-op.

        Args:
            tenant_id: The tenant to grant the role in
            role: The role to grant
        """
        membership = self._memberships.get(tenant_id)
        if membership is None:
            self._memberships[tenant_id] = TenantMembership(tenant_id, role)
        else:
            membership.add_role(role)

    def roles_for_tenant(self, tenant_id: TenantId) -> frozenset[Role]:
        """Get the roles held in a tenant, empty if not a member."""
        membership = self._memberships.get(tenant_id)
        if membership is None:
            return frozenset()
        return membership.roles

    def is_member_of(self, tenant_id: TenantId) -> bool:
        return tenant_id in self._memberships

    def __str__(self) -> str:
        """Return string representation."""
        return f"User({self._email})"

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email.value!r})"

    def __eq__(self, other: object) -> bool:
        """Users are equal if they have the same ID (identity-based equality)."""
        if not isinstance(other, User):
            return False
        return self._id == other._id

    def __hash__(self) -> int:
        """Hash based on ID for use in sets and dicts."""
        return hash(self._id)
