"""Value objects for IAM domain.

Value objects are immutable descriptors that provide type safety and
domain semantics for identifiers and domain concepts. Each one validates
itself on construction and raises ValidationError on bad input.
"""

from __future__ import annotations

import re
import uuid
from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar

from iam.domain.exceptions import ValidationError

# Separator used when a role set is flattened into a single string.
# Role names may never contain it.
ROLE_SEPARATOR = ","

_EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9+_.-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")


def _parse_uuid(value: str | None, label: str) -> uuid.UUID:
    if value is None or not value.strip():
        raise ValidationError(f"{label} cannot be empty")
    try:
        return uuid.UUID(value)
    except ValueError as e:
        raise ValidationError(f"Invalid {label}: {value}") from e


@dataclass(frozen=True)
class TenantId:
    """Identifier for a Tenant aggregate.

    Wraps a random (version 4) UUID.
    """

    value: uuid.UUID

    def __post_init__(self) -> None:
        if not isinstance(self.value, uuid.UUID):
            raise ValidationError("TenantId value cannot be null")

    def __str__(self) -> str:
        """Return string representation."""
        return str(self.value)

    @classmethod
    def generate(cls) -> TenantId:
        """Generate a new random TenantId."""
        return cls(value=uuid.uuid4())

    @classmethod
    def from_string(cls, value: str) -> TenantId:
        """Create TenantId from its canonical string form.

        Args:
            value: UUID string

        Returns:
            TenantId instance

        Raises:
            ValidationError: If value is empty or not a valid UUID
        """
        return cls(value=_parse_uuid(value, "TenantId"))


@dataclass(frozen=True)
class UserId:
    """Identifier for a User aggregate.

    Wraps a random (version 4) UUID.
    """

    value: uuid.UUID

    def __post_init__(self) -> None:
        if not isinstance(self.value, uuid.UUID):
            raise ValidationError("UserId value cannot be null")

    def __str__(self) -> str:
        """Return string representation."""
        return str(self.value)

    @classmethod
    def generate(cls) -> UserId:
        """Generate a new random UserId."""
        return cls(value=uuid.uuid4())

    @classmethod
    def from_string(cls, value: str) -> UserId:
        """Create UserId from its canonical string form.

        Raises:
            ValidationError: If value is empty or not a valid UUID
        """
        return cls(value=_parse_uuid(value, "UserId"))


@dataclass(frozen=True)
class Email:
    """An email address in local@domain.tld form.

    The value is kept exactly as given; construction fails for anything
    that does not match the pattern.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not _EMAIL_PATTERN.fullmatch(
            self.value
        ):
            raise ValidationError(f"Invalid email format: {self.value!r}")

    def __str__(self) -> str:
        """Return string representation."""
        return self.value


@dataclass(frozen=True)
class Role:
    """A named permission grant within a tenant membership.

    Any non-blank name is legal as long as it does not contain
    ROLE_SEPARATOR. ADMIN and MEMBER are the canonical roles.
    """

    name: str

    ADMIN: ClassVar[Role]
    MEMBER: ClassVar[Role]

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValidationError("Role name cannot be empty")
        if ROLE_SEPARATOR in self.name:
            raise ValidationError(
                f"Role name cannot contain {ROLE_SEPARATOR!r}: {self.name!r}"
            )

    def __str__(self) -> str:
        """Return string representation."""
        return self.name


Role.ADMIN = Role("ADMIN")
Role.MEMBER = Role("MEMBER")


class TenantStatus(StrEnum):
    """Lifecycle status of a tenant.

    PENDING is declared for completeness but no transition produces it.
    """

    PENDING = "PENDING"
    ACTIVE = "ACTIVE"
    SUSPENDED = "SUSPENDED"
