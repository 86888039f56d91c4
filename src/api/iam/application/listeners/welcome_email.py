"""Welcome notification for newly registered tenants."""

from __future__ import annotations

from iam.application.observability import DefaultNotificationProbe, NotificationProbe
from iam.domain.events import TenantRegistered


class WelcomeEmailListener:
    """Requests a welcome email when a tenant is registered.

    No mail transport is wired yet; the request is recorded through the
    notification probe.
    """

    def __init__(self, probe: NotificationProbe | None = None) -> None:
        self._probe = probe or DefaultNotificationProbe()

    def handle(self, event: TenantRegistered) -> None:
        self._probe.welcome_email_requested(
            tenant_id=event.tenant_id,
            tenant_name=event.name,
        )

    __call__ = handle
