from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from iam.application.observability import DefaultUserServiceProbe, UserServiceProbe
from iam.application.services import UserService
from iam.dependencies.identity_provider import get_identity_provider
from iam.dependencies.tenant import get_tenant_repository
from iam.infrastructure.tenant_repository import TenantRepository
from iam.infrastructure.user_repository import UserRepository
from iam.ports.identity_provider import IIdentityProvider
from infrastructure.database.dependencies import get_write_session


def get_user_service_probe() -> UserServiceProbe:
    """Get UserServiceProbe instance.

    Returns:
        DefaultUserServiceProbe instance for observability
    """
    return DefaultUserServiceProbe()


def get_user_repository(
    session: Annotated[AsyncSession, Depends(get_write_session)],
) -> UserRepository:
    """Get UserRepository instance.

    Args:
        session: Async database session

    Returns:
        UserRepository bound to the request's write session
    """
    return UserRepository(session=session)


def get_user_service(
    user_repo: Annotated[UserRepository, Depends(get_user_repository)],
    tenant_repo: Annotated[TenantRepository, Depends(get_tenant_repository)],
    identity_provider: Annotated[IIdentityProvider, Depends(get_identity_provider)],
    session: Annotated[AsyncSession, Depends(get_write_session)],
    probe: Annotated[UserServiceProbe, Depends(get_user_service_probe)],
) -> UserService:
    """Get UserService instance.

    Both repositories share the request's write session through FastAPI
    dependency caching, so an invitation reads and writes in one transaction.

    Returns:
        UserService instance
    """
    return UserService(
        user_repository=user_repo,
        tenant_repository=tenant_repo,
        identity_provider=identity_provider,
        session=session,
        probe=probe,
    )
