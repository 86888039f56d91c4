"""Unit tests for the IAM application probes."""

from unittest.mock import MagicMock

import structlog

from iam.application.observability import (
    DefaultNotificationProbe,
    DefaultTenantQueryServiceProbe,
    DefaultTenantServiceProbe,
    DefaultUserServiceProbe,
)
from shared_kernel.observability_context import ObservationContext


class TestDefaultTenantServiceProbe:
    def test_creates_with_default_logger(self):
        probe = DefaultTenantServiceProbe()

        assert probe._logger is not None

    def test_uses_provided_logger(self):
        custom_logger = structlog.get_logger()

        probe = DefaultTenantServiceProbe(logger=custom_logger)

        assert probe._logger is custom_logger

    def test_tenant_registered_logs_info(self):
        logger = MagicMock()
        probe = DefaultTenantServiceProbe(logger=logger)

        probe.tenant_registered(
            tenant_id="t-1", name="Acme Corp", contact_email="ops@acme.com"
        )

        logger.info.assert_called_once()
        assert logger.info.call_args[0][0] == "tenant_registered"
        assert logger.info.call_args[1]["name"] == "Acme Corp"
        assert logger.info.call_args[1]["contact_email"] == "ops@acme.com"

    def test_duplicate_tenant_name_logs_warning(self):
        logger = MagicMock()
        probe = DefaultTenantServiceProbe(logger=logger)

        probe.duplicate_tenant_name(name="Acme Corp")

        logger.warning.assert_called_once()
        assert logger.warning.call_args[0][0] == "duplicate_tenant_name"

    def test_with_context_includes_context_fields(self):
        logger = MagicMock()
        context = ObservationContext(request_id="req-123")
        probe = DefaultTenantServiceProbe(logger=logger).with_context(context)

        probe.duplicate_tenant_name(name="Acme Corp")

        assert logger.warning.call_args[1]["request_id"] == "req-123"


class TestDefaultUserServiceProbe:
    def test_identity_provider_failed_logs_error(self):
        logger = MagicMock()
        probe = DefaultUserServiceProbe(logger=logger)

        probe.identity_provider_failed(email="john@example.com", error="boom")

        logger.error.assert_called_once()
        assert logger.error.call_args[0][0] == "identity_provider_failed"
        assert logger.error.call_args[1]["error"] == "boom"

    def test_user_registration_orphaned_logs_external_id(self):
        logger = MagicMock()
        probe = DefaultUserServiceProbe(logger=logger)

        probe.user_registration_orphaned(
            email="john@example.com", external_id="kc-1", error="conflict"
        )

        logger.error.assert_called_once()
        assert logger.error.call_args[0][0] == "user_registration_orphaned"
        assert logger.error.call_args[1]["external_id"] == "kc-1"

    def test_user_invited_logs_info(self):
        logger = MagicMock()
        probe = DefaultUserServiceProbe(logger=logger)

        probe.user_invited(tenant_id="t-1", user_id="u-1", role="ADMIN")

        assert logger.info.call_args[0][0] == "user_invited"
        assert logger.info.call_args[1]["role"] == "ADMIN"


class TestDefaultTenantQueryServiceProbe:
    def test_duplicate_membership_rows_logs_error(self):
        logger = MagicMock()
        probe = DefaultTenantQueryServiceProbe(logger=logger)

        probe.duplicate_membership_rows(tenant_id="t-1", email="john@example.com")

        logger.error.assert_called_once()
        assert logger.error.call_args[0][0] == "duplicate_membership_rows"


class TestDefaultNotificationProbe:
    def test_welcome_email_requested_logs_info(self):
        logger = MagicMock()
        probe = DefaultNotificationProbe(logger=logger)

        probe.welcome_email_requested(tenant_id="t-1", tenant_name="Acme Corp")

        logger.info.assert_called_once()
        assert logger.info.call_args[0][0] == "welcome_email_requested"
        assert logger.info.call_args[1]["tenant_name"] == "Acme Corp"
