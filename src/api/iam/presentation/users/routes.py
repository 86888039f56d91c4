"""HTTP routes for user registration."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status

from iam.application.services import UserService
from iam.dependencies.user import get_user_service
from iam.domain.exceptions import ValidationError
from iam.ports.exceptions import DuplicateEmailError, ExternalProviderError
from iam.presentation.users.models import RegisterUserRequest, UserResponse

router = APIRouter(
    prefix="/users",
    tags=["users"],
)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
)
async def register_user(
    request: RegisterUserRequest,
    response: Response,
    service: Annotated[UserService, Depends(get_user_service)],
) -> UserResponse:
    """Register a user with the identity provider.

    Raises:
        HTTPException: 400 if the email is invalid
        HTTPException: 409 if the email is already registered
        HTTPException: 502 if the identity provider fails
        HTTPException: 500 for unexpected errors
    """
    try:
        summary = await service.register_user(
            username=request.username,
            email=request.email,
            credential=request.password.get_secret_value(),
        )
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e
    except DuplicateEmailError:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="A user with this email already exists",
        )
    except ExternalProviderError:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Identity provider failed to register the user",
        )
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to register user",
        )

    response.headers["Location"] = f"/iam/users/{summary.id}"
    return UserResponse.from_summary(summary)
