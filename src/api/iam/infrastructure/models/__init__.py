"""SQLAlchemy ORM models for IAM bounded context.

These models map to database tables and are used by repository implementations.
"""

from iam.infrastructure.models.tenant import TenantModel
from iam.infrastructure.models.user import UserMembershipModel, UserModel

__all__ = [
    "TenantModel",
    "UserMembershipModel",
    "UserModel",
]
