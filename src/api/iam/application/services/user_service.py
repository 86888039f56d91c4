"""User application service for IAM bounded context.

Handles user registration against the external identity provider and
tenant invitations.
"""

from __future__ import annotations

from iam.application.observability import DefaultUserServiceProbe, UserServiceProbe
from iam.application.value_objects import UserSummary
from iam.domain.aggregates import User
from iam.domain.value_objects import Email, Role, TenantId, UserId
from iam.ports.exceptions import (
    DuplicateEmailError,
    ExternalProviderError,
    TenantNotFoundError,
    UserNotFoundError,
)
from iam.ports.identity_provider import IIdentityProvider
from iam.ports.repositories import ITenantRepository, IUserRepository
from sqlalchemy.ext.asyncio import AsyncSession


class UserService:
    """Application service for user management.

    The identity provider owns credentials. This service only keeps the
    reference the provider hands back, and never retries or compensates a
    provider call.
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        tenant_repository: ITenantRepository,
        identity_provider: IIdentityProvider,
        session: AsyncSession,
        probe: UserServiceProbe | None = None,
    ):
        """Initialize UserService with dependencies.

        Args:
            user_repository: Repository for user persistence
            tenant_repository: Repository used to resolve invitation targets
            identity_provider: External provider that stores credentials
            session: Database session for transaction management
            probe: Optional domain probe for observability
        """
        self._user_repository = user_repository
        self._tenant_repository = tenant_repository
        self._identity_provider = identity_provider
        self._probe = probe or DefaultUserServiceProbe()
        self._session = session

    async def register_user(
        self, username: str, email: str, credential: str
    ) -> UserSummary:
        """Register a user with the identity provider and store it locally.

        Args:
            username: Username to register with the provider
            email: The user's email address
            credential: Plaintext credential passed through to the provider

        Returns:
            Projection of the registered user

        Raises:
            ValidationError: If the email is malformed
            DuplicateEmailError: If a user with this email already exists
            ExternalProviderError: If the identity provider fails
        """
        user_email = Email(email)
        external_id: str | None = None

        try:
            async with self._session.begin():
                if await self._user_repository.get_by_email(user_email) is not None:
                    raise DuplicateEmailError(
                        f"User with email '{email}' already exists"
                    )

                external_id = await self._identity_provider.register_user(
                    username, email, credential
                )

                user = User.register(
                    user_id=UserId.generate(),
                    external_id=external_id,
                    email=user_email,
                )
                await self._user_repository.save(user)

        except ExternalProviderError as e:
            self._probe.identity_provider_failed(email=email, error=str(e))
            raise
        except Exception as e:
            if isinstance(e, DuplicateEmailError):
                self._probe.duplicate_email(email=email)
            # The provider keeps the identity; nothing removes it.
            if external_id is not None:
                self._probe.user_registration_orphaned(
                    email=email,
                    external_id=external_id,
                    error=str(e),
                )
            raise

        self._probe.user_registered(
            user_id=str(user.id),
            email=email,
            external_id=external_id,
        )
        return UserSummary.from_domain(user)

    async def invite_user_to_tenant(
        self, tenant_id: str, email: str, role_name: str
    ) -> None:
        """Grant a role in a tenant to an already registered user.

        Inviting a user into a tenant they already belong to adds the role
        to their existing membership.

        Args:
            tenant_id: Target tenant id (UUID string)
            email: Email of the registered user
            role_name: Name of the role to grant

        Raises:
            ValidationError: If the tenant id, email or role name is invalid
            TenantNotFoundError: If the tenant does not exist
            UserNotFoundError: If no user has this email
        """
        tid = TenantId.from_string(tenant_id)

        async with self._session.begin():
            tenant = await self._tenant_repository.get_by_id(tid)
            if tenant is None:
                self._probe.tenant_not_found(tenant_id=tenant_id)
                raise TenantNotFoundError(f"Tenant {tenant_id} not found")

            user_email = Email(email)
            user = await self._user_repository.get_by_email(user_email)
            if user is None:
                self._probe.user_not_found(email=email)
                raise UserNotFoundError(f"User with email '{email}' not found")

            role = Role(role_name)
            user.add_to_tenant(tenant.id, role)
            await self._user_repository.save(user)

        self._probe.user_invited(
            tenant_id=str(tenant.id),
            user_id=str(user.id),
            role=role.name,
        )
