"""Pydantic models for tenant API requests and responses."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from iam.application.value_objects import MemberView, TenantDetails, TenantSummary


class CreateTenantRequest(BaseModel):
    """Request model for registering a tenant.

    Field content is validated by the domain, so a blank name or a
    malformed email comes back as 400 rather than 422.
    """

    name: str = Field(..., description="Tenant name", max_length=255)
    contact_email: str | None = Field(
        default=None, description="Optional contact address for the tenant"
    )


class TenantResponse(BaseModel):
    """Response model for a registered tenant."""

    id: str = Field(..., description="Tenant ID (UUID)")
    name: str = Field(..., description="Tenant name")
    status: str = Field(..., description="Lifecycle status")
    creation_date: datetime = Field(..., description="Registration time (UTC)")

    @classmethod
    def from_summary(cls, summary: TenantSummary) -> TenantResponse:
        """Convert a TenantSummary projection to an API response.

        Args:
            summary: Projection returned by TenantService

        Returns:
            TenantResponse
        """
        return cls(
            id=summary.id,
            name=summary.name,
            status=summary.status,
            creation_date=summary.creation_date,
        )


class InviteUserRequest(BaseModel):
    """Request model for granting a registered user a role in a tenant."""

    email: str = Field(..., description="Email of a registered user")
    role: str = Field(..., description="Role name, e.g. ADMIN or MEMBER")


class MemberResponse(BaseModel):
    """Response model for one tenant member."""

    email: str = Field(..., description="Member email")
    roles: list[str] = Field(..., description="Roles held in the tenant")

    @classmethod
    def from_view(cls, member: MemberView) -> MemberResponse:
        return cls(email=member.email, roles=list(member.roles))


class TenantDetailsResponse(BaseModel):
    """Response model for a tenant together with its members."""

    id: str = Field(..., description="Tenant ID (UUID)")
    name: str = Field(..., description="Tenant name")
    status: str = Field(..., description="Lifecycle status")
    creation_date: datetime = Field(..., description="Registration time (UTC)")
    members: list[MemberResponse] = Field(..., description="Tenant members")

    @classmethod
    def from_details(cls, details: TenantDetails) -> TenantDetailsResponse:
        """Convert TenantDetails to an API response.

        Args:
            details: Read model returned by TenantQueryService

        Returns:
            TenantDetailsResponse
        """
        return cls(
            id=details.id,
            name=details.name,
            status=details.status,
            creation_date=details.creation_date,
            members=[MemberResponse.from_view(m) for m in details.members],
        )
