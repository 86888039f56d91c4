"""External identity provider port for IAM bounded context.

The identity provider is the system of record for credentials. The IAM
core never inspects or stores a credential; it only keeps the opaque
reference the provider returns.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class IIdentityProvider(Protocol):
    """Delegate for creating credentials in the external identity provider."""

    async def register_user(self, username: str, email: str, credential: str) -> str:
        """Create an identity in the external provider.

        Args:
            username: Username to register
            email: Email address to register
            credential: Plaintext credential, passed through untouched

        Returns:
            The provider's opaque reference for the created identity

        Raises:
            ExternalProviderError: If the provider rejects the request or
                cannot be reached
        """
        ...
