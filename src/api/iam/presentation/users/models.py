"""Pydantic models for user API requests and responses."""

from __future__ import annotations

from pydantic import BaseModel, Field, SecretStr

from iam.application.value_objects import UserSummary


class RegisterUserRequest(BaseModel):
    """Request model for registering a user.

    The password is handed to the identity provider and never stored.
    """

    username: str = Field(..., description="Username", min_length=1, max_length=255)
    email: str = Field(..., description="Email address")
    password: SecretStr = Field(..., description="Initial password")


class UserResponse(BaseModel):
    """Response model for a registered user."""

    id: str = Field(..., description="User ID (UUID)")
    email: str = Field(..., description="Email address")
    external_id: str = Field(..., description="Identity provider reference")

    @classmethod
    def from_summary(cls, summary: UserSummary) -> UserResponse:
        return cls(
            id=summary.id,
            email=summary.email,
            external_id=summary.external_id,
        )
