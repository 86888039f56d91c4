"""Architecture tests for the IAM bounded context.

These tests enforce the layering inside IAM: the domain stays free of
frameworks and adapters, ports depend only on the domain, and the
application layer reaches infrastructure only through ports.
"""

from pytest_archon import archrule


class TestDomainLayerIsolation:
    """The domain layer must be pure Python."""

    def test_domain_does_not_import_frameworks(self):
        """Domain code may not depend on persistence, HTTP or web frameworks."""
        (
            archrule("iam_domain_no_frameworks")
            .match("iam.domain*")
            .should_not_import("sqlalchemy*")
            .should_not_import("fastapi*")
            .should_not_import("httpx*")
            .should_not_import("pydantic*")
            .check("iam")
        )

    def test_domain_does_not_import_outer_layers(self):
        (
            archrule("iam_domain_no_outer_layers")
            .match("iam.domain*")
            .should_not_import("iam.application*")
            .should_not_import("iam.infrastructure*")
            .should_not_import("iam.presentation*")
            .should_not_import("iam.ports*")
            .should_not_import("infrastructure*")
            .check("iam")
        )


class TestPortsLayerIsolation:
    def test_ports_do_not_import_adapters(self):
        """Ports describe contracts; they never reach concrete adapters."""
        (
            archrule("iam_ports_no_adapters")
            .match("iam.ports*")
            .should_not_import("iam.infrastructure*")
            .should_not_import("iam.application*")
            .should_not_import("iam.presentation*")
            .should_not_import("infrastructure*")
            .check("iam")
        )


class TestApplicationLayerIsolation:
    def test_application_does_not_import_adapters(self):
        """Application services talk to adapters only through ports."""
        (
            archrule("iam_application_no_adapters")
            .match("iam.application*")
            .should_not_import("iam.infrastructure*")
            .should_not_import("iam.presentation*")
            .should_not_import("iam.dependencies*")
            .check("iam")
        )

