"""IAM presentation layer - aggregate-based organization.

Organizes presentation concerns by domain aggregate (tenants, users)
following vertical slicing and DDD principles. Each aggregate package
contains its own routes and models.
"""

from __future__ import annotations

from fastapi import APIRouter

from iam.presentation.tenants.routes import router as tenants_router
from iam.presentation.users.routes import router as users_router

router = APIRouter(
    prefix="/iam",
    tags=["iam"],
)

router.include_router(tenants_router)
router.include_router(users_router)

__all__ = ["router"]
