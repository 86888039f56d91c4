from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from iam.application.observability import (
    DefaultTenantQueryServiceProbe,
    TenantQueryServiceProbe,
)
from iam.application.services import TenantQueryService
from iam.infrastructure.read_model import SqlTenantReadModel
from infrastructure.database.dependencies import get_read_session


def get_tenant_query_service_probe() -> TenantQueryServiceProbe:
    return DefaultTenantQueryServiceProbe()


def get_tenant_read_model(
    session: Annotated[AsyncSession, Depends(get_read_session)],
) -> SqlTenantReadModel:
    """Get the SQL tenant read model on the read session."""
    return SqlTenantReadModel(session=session)


def get_tenant_query_service(
    read_model: Annotated[SqlTenantReadModel, Depends(get_tenant_read_model)],
    probe: Annotated[
        TenantQueryServiceProbe, Depends(get_tenant_query_service_probe)
    ],
) -> TenantQueryService:
    """Get TenantQueryService instance.

    Returns:
        TenantQueryService reading through the SQL read model
    """
    return TenantQueryService(read_model=read_model, probe=probe)
