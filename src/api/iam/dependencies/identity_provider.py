from functools import lru_cache

from iam.infrastructure.keycloak_identity_provider import KeycloakIdentityProvider
from iam.ports.identity_provider import IIdentityProvider
from infrastructure.settings import get_keycloak_settings


@lru_cache
def get_identity_provider() -> IIdentityProvider:
    """Get cached Keycloak identity provider.

    Returns:
        KeycloakIdentityProvider configured from Keycloak settings
    """
    return KeycloakIdentityProvider(settings=get_keycloak_settings())
