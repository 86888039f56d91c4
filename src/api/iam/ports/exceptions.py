"""Application-level exceptions for IAM bounded context.

These exceptions represent failures raised by application services and
repository/provider adapters. They should be caught and mapped to
transport responses at the boundary.
"""


class ConflictError(Exception):
    """Raised when a uniqueness rule would be violated.

    Raised either by an application service after an explicit existence
    check or by a repository when the storage-level unique constraint
    rejects a write. The latter is the authoritative outcome.
    """

    pass


class DuplicateTenantNameError(ConflictError):
    """Raised when attempting to register a tenant with a name that already exists.

    Tenant names are globally unique across the system.
    """

    pass


class DuplicateEmailError(ConflictError):
    """Raised when attempting to register a user with an email already in use."""

    pass


class NotFoundError(Exception):
    """Raised when a referenced aggregate does not exist."""

    pass


class TenantNotFoundError(NotFoundError):
    """Raised when a tenant id does not resolve to a tenant."""

    pass


class UserNotFoundError(NotFoundError):
    """Raised when no user is registered under the given email."""

    pass


class ExternalProviderError(Exception):
    """Raised when the external identity provider rejects a request or cannot be reached.

    Propagated unmodified by application services; no retry is attempted.
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
