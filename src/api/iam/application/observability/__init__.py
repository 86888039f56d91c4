"""Domain-Oriented Observability for IAM application layer.

Probes for application service operations following Domain-Oriented Observability patterns.
"""

from iam.application.observability.notification_probe import (
    DefaultNotificationProbe,
    NotificationProbe,
)
from iam.application.observability.tenant_query_service_probe import (
    DefaultTenantQueryServiceProbe,
    TenantQueryServiceProbe,
)
from iam.application.observability.tenant_service_probe import (
    DefaultTenantServiceProbe,
    TenantServiceProbe,
)
from iam.application.observability.user_service_probe import (
    DefaultUserServiceProbe,
    UserServiceProbe,
)

__all__ = [
    "NotificationProbe",
    "DefaultNotificationProbe",
    "TenantQueryServiceProbe",
    "DefaultTenantQueryServiceProbe",
    "TenantServiceProbe",
    "DefaultTenantServiceProbe",
    "UserServiceProbe",
    "DefaultUserServiceProbe",
]
