"""Keycloak implementation of IIdentityProvider.

Talks to the Keycloak admin REST API over httpx. Each registration logs
in as the admin user (password grant against the admin realm) and then
creates the user in the managed realm.
"""

from __future__ import annotations

from typing import Any

import httpx

from iam.infrastructure.observability import (
    DefaultIdentityProviderProbe,
    IdentityProviderProbe,
)
from iam.ports.exceptions import ExternalProviderError
from iam.ports.identity_provider import IIdentityProvider
from infrastructure.settings import KeycloakSettings


class KeycloakIdentityProvider(IIdentityProvider):
    """Creates identities in a Keycloak realm.

    A single attempt is made per call. Any status other than 201, a
    missing Location header, or a transport error raises
    ExternalProviderError.
    """

    def __init__(
        self,
        settings: KeycloakSettings,
        probe: IdentityProviderProbe | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings
        self._transport = transport
        self._probe = probe or DefaultIdentityProviderProbe()
        self._base_url = settings.server_url.rstrip("/")

    @property
    def _token_url(self) -> str:
        return (
            f"{self._base_url}/realms/{self._settings.admin_realm}"
            "/protocol/openid-connect/token"
        )

    @property
    def _users_url(self) -> str:
        return f"{self._base_url}/admin/realms/{self._settings.realm}/users"

    def _timeout(self) -> httpx.Timeout:
        return httpx.Timeout(self._settings.timeout_seconds)

    @staticmethod
    def _user_representation(
        username: str, email: str, credential: str
    ) -> dict[str, Any]:
        return {
            "username": username,
            "email": email,
            "enabled": True,
            "emailVerified": True,
            # Keycloak's default user profile requires both names
            "firstName": username,
            "lastName": "User",
            "credentials": [
                {"type": "password", "value": credential, "temporary": False}
            ],
        }

    async def _admin_token(self, client: httpx.AsyncClient) -> str:
        response = await client.post(
            self._token_url,
            data={
                "grant_type": "password",
                "client_id": self._settings.admin_client_id,
                "username": self._settings.admin_username,
                "password": self._settings.admin_password.get_secret_value(),
            },
        )
        if response.status_code != 200:
            self._probe.admin_token_failed(
                status_code=response.status_code, error="token request rejected"
            )
            raise ExternalProviderError(
                f"Keycloak admin login failed. Status: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            body = response.json()
        except ValueError as e:
            self._probe.admin_token_failed(
                status_code=response.status_code, error="token response is not JSON"
            )
            raise ExternalProviderError(
                "Keycloak admin login returned an unreadable body",
                status_code=response.status_code,
            ) from e

        token = body.get("access_token") if isinstance(body, dict) else None
        if not isinstance(token, str) or not token:
            self._probe.admin_token_failed(
                status_code=response.status_code, error="no access_token in response"
            )
            raise ExternalProviderError("Keycloak admin login returned no token")
        return token

    async def register_user(self, username: str, email: str, credential: str) -> str:
        """Create a user in the managed realm.

        Args:
            username: Username to register
            email: Email address to register
            credential: Password, set as a non-temporary credential

        Returns:
            The Keycloak user id (last segment of the Location header)

        Raises:
            ExternalProviderError: On any outcome other than 201 with a Location
        """
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout(), transport=self._transport
            ) as client:
                token = await self._admin_token(client)
                response = await client.post(
                    self._users_url,
                    json=self._user_representation(username, email, credential),
                    headers={"Authorization": f"Bearer {token}"},
                )
        except httpx.HTTPError as e:
            self._probe.provider_unreachable(url=self._base_url, error=str(e))
            raise ExternalProviderError(f"Keycloak request failed: {e}") from e

        if response.status_code != 201:
            self._probe.identity_rejected(
                username=username, status_code=response.status_code
            )
            raise ExternalProviderError(
                f"Failed to create user in Keycloak. Status: {response.status_code}",
                status_code=response.status_code,
            )

        location = response.headers.get("Location")
        if not location:
            raise ExternalProviderError(
                "Keycloak created the user but sent no Location header",
                status_code=response.status_code,
            )

        external_id = location.rstrip("/").rsplit("/", 1)[-1]
        self._probe.identity_created(username=username, external_id=external_id)
        return external_id
