"""Domain aggregates for IAM context.

Aggregates are the core business objects containing state and business logic.
They enforce invariants and business rules without depending on infrastructure.
"""

from iam.domain.aggregates.tenant import Tenant
from iam.domain.aggregates.user import TenantMembership, User

__all__ = [
    "Tenant",
    "TenantMembership",
    "User",
]
