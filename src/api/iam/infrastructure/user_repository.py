"""PostgreSQL implementation of IUserRepository.

A user is stored as one users row plus one user_memberships row per
tenant. The membership's role set is flattened into a single joined
string (see iam.domain.role_codec).
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from iam.domain.aggregates import User
from iam.domain.role_codec import decode_roles, encode_roles
from iam.domain.value_objects import Email, TenantId, UserId
from iam.infrastructure.models import UserMembershipModel, UserModel
from iam.infrastructure.observability import (
    DefaultUserRepositoryProbe,
    UserRepositoryProbe,
)
from iam.ports.exceptions import DuplicateEmailError
from iam.ports.repositories import IUserRepository

_EMAIL_CONSTRAINT_MARKERS = ("ix_users_email", "users.email")


class UserRepository(IUserRepository):
    """PostgreSQL-backed repository for User aggregates.

    Saving reconciles the child rows so that they match the aggregate's
    membership map exactly; loading replays every stored role through
    User.add_to_tenant.
    """

    def __init__(
        self, session: AsyncSession, probe: UserRepositoryProbe | None = None
    ) -> None:
        """Initialize repository with database session and probe.

        Args:
            session: AsyncSession from FastAPI dependency injection
            probe: Optional domain probe for observability
        """
        self._session = session
        self._probe = probe or DefaultUserRepositoryProbe()

    async def save(self, user: User) -> None:
        """Persist a user aggregate and its memberships.

        Args:
            user: The User aggregate to persist

        Raises:
            DuplicateEmailError: If another user already holds the email
        """
        wanted = {
            str(tenant_id): encode_roles(roles)
            for tenant_id, roles in user.memberships.items()
        }

        try:
            stmt = (
                select(UserModel)
                .options(selectinload(UserModel.memberships))
                .where(UserModel.id == str(user.id))
            )
            result = await self._session.execute(stmt)
            model = result.scalar_one_or_none()

            if model is None:
                model = UserModel(
                    id=str(user.id),
                    external_id=user.external_id,
                    email=user.email.value,
                    memberships=[],
                )
                self._session.add(model)
            else:
                model.external_id = user.external_id
                model.email = user.email.value

            existing = {row.tenant_id: row for row in model.memberships}
            for tenant_id, row in existing.items():
                if tenant_id not in wanted:
                    model.memberships.remove(row)
            for tenant_id, roles in wanted.items():
                row = existing.get(tenant_id)
                if row is None:
                    model.memberships.append(
                        UserMembershipModel(tenant_id=tenant_id, roles=roles)
                    )
                elif row.roles != roles:
                    row.roles = roles

            await self._session.flush()

        except IntegrityError as e:
            if any(marker in str(e) for marker in _EMAIL_CONSTRAINT_MARKERS):
                self._probe.duplicate_email(user.email.value)
                raise DuplicateEmailError(
                    f"User with email '{user.email.value}' already exists"
                ) from e
            raise

        self._probe.user_saved(str(user.id), membership_count=len(wanted))

    async def get_by_id(self, user_id: UserId) -> User | None:
        """Retrieve a user by their ID.

        Args:
            user_id: The unique identifier of the user

        Returns:
            The User aggregate, or None if not found
        """
        stmt = (
            select(UserModel)
            .options(selectinload(UserModel.memberships))
            .where(UserModel.id == str(user_id))
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            self._probe.user_not_found(str(user_id))
            return None

        self._probe.user_retrieved(model.id)
        return self._to_domain(model)

    async def get_by_email(self, email: Email) -> User | None:
        """Retrieve a user by their email.

        Args:
            email: The email to search for

        Returns:
            The User aggregate, or None if not found
        """
        stmt = (
            select(UserModel)
            .options(selectinload(UserModel.memberships))
            .where(UserModel.email == email.value)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            self._probe.email_not_found(email.value)
            return None

        self._probe.user_retrieved(model.id)
        return self._to_domain(model)

    @staticmethod
    def _to_domain(model: UserModel) -> User:
        user = User(
            id=UserId.from_string(model.id),
            external_id=model.external_id,
            email=Email(model.email),
        )
        for row in model.memberships:
            tenant_id = TenantId.from_string(row.tenant_id)
            for role in decode_roles(row.roles):
                user.add_to_tenant(tenant_id, role)
        return user
