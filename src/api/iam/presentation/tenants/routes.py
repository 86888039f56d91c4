"""HTTP routes for tenant management."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status

from iam.application.services import TenantQueryService, TenantService, UserService
from iam.dependencies.query import get_tenant_query_service
from iam.dependencies.tenant import get_tenant_service
from iam.dependencies.user import get_user_service
from iam.domain.exceptions import ValidationError
from iam.ports.exceptions import DuplicateTenantNameError, NotFoundError
from iam.presentation.tenants.models import (
    CreateTenantRequest,
    InviteUserRequest,
    TenantDetailsResponse,
    TenantResponse,
)

router = APIRouter(
    prefix="/tenants",
    tags=["tenants"],
)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
)
async def register_tenant(
    request: CreateTenantRequest,
    response: Response,
    service: Annotated[TenantService, Depends(get_tenant_service)],
) -> TenantResponse:
    """Register a new tenant.

    Args:
        request: Tenant registration request (name, optional contact email)
        response: Outgoing response, used to set the Location header
        service: Tenant service for orchestration

    Returns:
        TenantResponse with the registered tenant

    Raises:
        HTTPException: 400 if the name or contact email is invalid
        HTTPException: 409 if tenant name already exists
        HTTPException: 500 for unexpected errors
    """
    try:
        summary = await service.register_tenant(
            name=request.name,
            contact_email=request.contact_email,
        )
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e
    except DuplicateTenantNameError:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="A tenant with this name already exists",
        )
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to register tenant",
        )

    response.headers["Location"] = f"/iam/tenants/{summary.id}"
    return TenantResponse.from_summary(summary)


@router.post(
    "/{tenant_id}/users",
    status_code=status.HTTP_204_NO_CONTENT,
    response_model=None,
    responses={
        204: {"description": "Role granted"},
        400: {"description": "Invalid tenant ID, email or role"},
        404: {"description": "Tenant or user not found"},
        500: {"description": "Internal server error"},
    },
)
async def invite_user(
    tenant_id: str,
    request: InviteUserRequest,
    service: Annotated[UserService, Depends(get_user_service)],
) -> None:
    """Grant a registered user a role in a tenant.

    Args:
        tenant_id: Tenant ID (UUID format)
        request: Email of the user and the role to grant
        service: User service

    Raises:
        HTTPException: 400 if tenant ID, email or role is invalid
        HTTPException: 404 if the tenant or the user does not exist
        HTTPException: 500 for unexpected errors
    """
    try:
        await service.invite_user_to_tenant(
            tenant_id=tenant_id,
            email=request.email,
            role_name=request.role,
        )
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        ) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to invite user",
        )


@router.get("/{tenant_id}")
async def get_tenant_details(
    tenant_id: str,
    service: Annotated[TenantQueryService, Depends(get_tenant_query_service)],
) -> TenantDetailsResponse:
    """Get a tenant and its members.

    Args:
        tenant_id: Tenant ID (UUID format)
        service: Tenant query service

    Returns:
        TenantDetailsResponse with one entry per member

    Raises:
        HTTPException: 400 if tenant ID is invalid
        HTTPException: 404 if tenant not found
        HTTPException: 500 for unexpected errors
    """
    try:
        details = await service.get_tenant_details(tenant_id)
        return TenantDetailsResponse.from_details(details)

    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid tenant ID format: {e}",
        ) from e
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Tenant {tenant_id} not found",
        )
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve tenant",
        )
