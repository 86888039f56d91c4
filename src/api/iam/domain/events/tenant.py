"""Tenant domain events for IAM context.

Domain events related to tenant lifecycle.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TenantRegistered:
    """Event raised when a new tenant is registered.

    Published to the local event sink once the tenant row has been
    committed, before the registering command returns.

    Attributes:
        tenant_id: The UUID of the registered tenant (string form)
        name: The name of the tenant
        occurred_on: When the event occurred (UTC)
    """

    tenant_id: str
    name: str
    occurred_on: datetime
