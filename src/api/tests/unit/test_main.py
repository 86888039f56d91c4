"""Unit tests for main FastAPI application configuration."""

from __future__ import annotations

from unittest.mock import Mock, patch

import pytest
from fastapi import FastAPI, status
from fastapi.testclient import TestClient
from sqlalchemy import inspect

from infrastructure.database.models import Base
from infrastructure.observability import StartupProbe


@pytest.fixture
def app() -> FastAPI:
    from main import create_app

    return create_app()


class TestCreateApp:
    def test_health_endpoint(self, app: FastAPI) -> None:
        with TestClient(app) as client:
            response = client.get("/health")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"status": "ok"}

    def test_mounts_iam_routes(self, app: FastAPI) -> None:
        paths = {route.path for route in app.routes}

        assert "/iam/tenants" in paths
        assert "/iam/tenants/{tenant_id}" in paths
        assert "/iam/tenants/{tenant_id}/users" in paths
        assert "/iam/users" in paths

    def test_malformed_body_returns_400(self, app: FastAPI) -> None:
        with TestClient(app) as client:
            response = client.post("/iam/tenants", json={})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"][0]["loc"] == ["body", "name"]


class TestRegisterEventListeners:
    def test_subscribes_welcome_email_listener(self) -> None:
        from iam.domain.events import TenantRegistered
        from main import register_event_listeners

        probe = Mock(spec=StartupProbe)
        bus = Mock()

        with patch("main.get_event_bus", return_value=bus):
            register_event_listeners(probe)

        bus.subscribe.assert_called_once()
        assert bus.subscribe.call_args[0][0] is TenantRegistered
        probe.event_listener_registered.assert_called_once_with(
            event_type="TenantRegistered", listener="WelcomeEmailListener"
        )

    def test_returned_callback_unsubscribes(self) -> None:
        from iam.domain.events import TenantRegistered
        from main import register_event_listeners

        bus = Mock()

        with patch("main.get_event_bus", return_value=bus):
            unregister = register_event_listeners(Mock(spec=StartupProbe))
        unregister()

        handler = bus.subscribe.call_args[0][1]
        bus.unsubscribe.assert_called_once_with(TenantRegistered, handler)

    def test_restarting_app_keeps_one_listener(self, app: FastAPI) -> None:
        from iam.domain.events import TenantRegistered
        from iam.infrastructure.event_bus import InProcessEventBus

        bus = InProcessEventBus()

        with patch("main.get_event_bus", return_value=bus):
            for _ in range(3):
                with TestClient(app):
                    assert len(bus._handlers[TenantRegistered]) == 1

        assert bus._handlers[TenantRegistered] == []


class TestCreateSchema:
    @pytest.mark.asyncio
    async def test_creates_iam_tables(self, sqlite_engine) -> None:
        from main import create_schema

        async with sqlite_engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

        with patch("main.get_write_engine", return_value=sqlite_engine):
            await create_schema()

        async with sqlite_engine.connect() as conn:
            tables = await conn.run_sync(
                lambda sync_conn: set(inspect(sync_conn).get_table_names())
            )

        assert {"tenants", "users", "user_memberships"} <= tables
