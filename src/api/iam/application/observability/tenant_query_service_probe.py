"""Protocol for tenant query service observability."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class TenantQueryServiceProbe(Protocol):
    """Domain probe for tenant read-model queries."""

    def tenant_details_retrieved(self, tenant_id: str, member_count: int) -> None:
        """Record that tenant details were assembled."""
        ...

    def tenant_not_found(self, tenant_id: str) -> None:
        """Record that a queried tenant does not exist."""
        ...

    def duplicate_membership_rows(self, tenant_id: str, email: str) -> None:
        """Record that more than one membership row exists for a (user, tenant) pair."""
        ...

    def with_context(self, context: ObservationContext) -> TenantQueryServiceProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultTenantQueryServiceProbe:
    """Default implementation of TenantQueryServiceProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(
        self, context: ObservationContext
    ) -> DefaultTenantQueryServiceProbe:
        """Create a new probe with observation context bound."""
        return DefaultTenantQueryServiceProbe(logger=self._logger, context=context)

    def tenant_details_retrieved(self, tenant_id: str, member_count: int) -> None:
        self._logger.debug(
            "tenant_details_retrieved",
            tenant_id=tenant_id,
            member_count=member_count,
            **self._get_context_kwargs(),
        )

    def tenant_not_found(self, tenant_id: str) -> None:
        self._logger.debug(
            "tenant_not_found",
            tenant_id=tenant_id,
            **self._get_context_kwargs(),
        )

    def duplicate_membership_rows(self, tenant_id: str, email: str) -> None:
        self._logger.error(
            "duplicate_membership_rows",
            tenant_id=tenant_id,
            email=email,
            **self._get_context_kwargs(),
        )
