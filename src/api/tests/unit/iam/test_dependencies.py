"""Unit tests for IAM dependency wiring."""

from unittest.mock import Mock

from sqlalchemy.ext.asyncio import AsyncSession

from iam.application.services import TenantQueryService, TenantService, UserService
from iam.dependencies.events import get_event_bus
from iam.dependencies.identity_provider import get_identity_provider
from iam.dependencies.query import get_tenant_query_service, get_tenant_read_model
from iam.dependencies.tenant import (
    get_tenant_repository,
    get_tenant_service,
    get_tenant_service_probe,
)
from iam.dependencies.user import (
    get_user_repository,
    get_user_service,
    get_user_service_probe,
)
from iam.infrastructure.event_bus import InProcessEventBus
from iam.infrastructure.keycloak_identity_provider import KeycloakIdentityProvider
from iam.infrastructure.read_model import SqlTenantReadModel
from iam.infrastructure.tenant_repository import TenantRepository
from iam.infrastructure.user_repository import UserRepository


class TestSingletons:
    def test_event_bus_is_shared(self):
        assert isinstance(get_event_bus(), InProcessEventBus)
        assert get_event_bus() is get_event_bus()

    def test_identity_provider_is_keycloak(self):
        assert isinstance(get_identity_provider(), KeycloakIdentityProvider)
        assert get_identity_provider() is get_identity_provider()


class TestServiceFactories:
    def test_tenant_service(self):
        session = Mock(spec=AsyncSession)
        repo = get_tenant_repository(session)

        service = get_tenant_service(
            repo, get_event_bus(), session, get_tenant_service_probe()
        )

        assert isinstance(repo, TenantRepository)
        assert isinstance(service, TenantService)

    def test_user_service(self):
        session = Mock(spec=AsyncSession)
        user_repo = get_user_repository(session)

        service = get_user_service(
            user_repo,
            get_tenant_repository(session),
            get_identity_provider(),
            session,
            get_user_service_probe(),
        )

        assert isinstance(user_repo, UserRepository)
        assert isinstance(service, UserService)

    def test_tenant_query_service(self):
        read_model = get_tenant_read_model(Mock(spec=AsyncSession))

        service = get_tenant_query_service(read_model, Mock())

        assert isinstance(read_model, SqlTenantReadModel)
        assert isinstance(service, TenantQueryService)
