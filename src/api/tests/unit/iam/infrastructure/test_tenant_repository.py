"""Unit tests for TenantRepository."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock, Mock

import pytest
from sqlalchemy.exc import IntegrityError

from iam.domain.aggregates import Tenant
from iam.domain.value_objects import TenantId, TenantStatus
from iam.infrastructure.models import TenantModel
from iam.infrastructure.observability import TenantRepositoryProbe
from iam.infrastructure.tenant_repository import TenantRepository
from iam.ports.exceptions import DuplicateTenantNameError
from iam.ports.repositories import ITenantRepository


@pytest.fixture
def mock_session():
    """Create mock async session."""
    session = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def mock_probe():
    return Mock(spec=TenantRepositoryProbe)


@pytest.fixture
def repository(mock_session, mock_probe):
    return TenantRepository(session=mock_session, probe=mock_probe)


def _result(value):
    result = MagicMock()
    result.scalar_one_or_none.return_value = value
    return result


class TestProtocolCompliance:
    def test_implements_protocol(self, repository):
        assert isinstance(repository, ITenantRepository)


class TestSave:
    """Tests for save method."""

    @pytest.mark.asyncio
    async def test_adds_new_tenant(self, repository, mock_session, mock_probe):
        tenant = Tenant.register(TenantId.generate(), "Acme Corp")
        mock_session.execute.return_value = _result(None)

        await repository.save(tenant)

        mock_session.add.assert_called_once()
        model = mock_session.add.call_args[0][0]
        assert isinstance(model, TenantModel)
        assert model.id == str(tenant.id)
        assert model.name == "Acme Corp"
        assert model.status == "ACTIVE"
        assert model.creation_date == tenant.creation_date
        mock_session.flush.assert_awaited_once()
        mock_probe.tenant_saved.assert_called_once_with(str(tenant.id))

    @pytest.mark.asyncio
    async def test_updates_existing_tenant(self, repository, mock_session):
        tenant = Tenant.register(TenantId.generate(), "Acme Corp")
        existing = TenantModel(
            id=str(tenant.id),
            name="Old Name",
            status="ACTIVE",
            creation_date=tenant.creation_date,
        )
        mock_session.execute.return_value = _result(existing)
        tenant.suspend()

        await repository.save(tenant)

        mock_session.add.assert_not_called()
        assert existing.name == "Acme Corp"
        assert existing.status == "SUSPENDED"

    @pytest.mark.asyncio
    async def test_name_constraint_violation_raises_duplicate(
        self, repository, mock_session, mock_probe
    ):
        tenant = Tenant.register(TenantId.generate(), "Acme Corp")
        mock_session.execute.return_value = _result(None)
        mock_session.flush.side_effect = IntegrityError(
            "INSERT INTO tenants ...",
            {},
            Exception(
                'duplicate key value violates unique constraint "ix_tenants_name"'
            ),
        )

        with pytest.raises(DuplicateTenantNameError, match="already exists"):
            await repository.save(tenant)

        mock_probe.duplicate_tenant_name.assert_called_once_with("Acme Corp")
        mock_probe.tenant_saved.assert_not_called()

    @pytest.mark.asyncio
    async def test_other_integrity_errors_propagate(self, repository, mock_session):
        tenant = Tenant.register(TenantId.generate(), "Acme Corp")
        mock_session.execute.return_value = _result(None)
        mock_session.flush.side_effect = IntegrityError(
            "INSERT INTO tenants ...", {}, Exception("NOT NULL constraint failed")
        )

        with pytest.raises(IntegrityError):
            await repository.save(tenant)

    @pytest.mark.asyncio
    async def test_does_not_drain_events(self, repository, mock_session):
        tenant = Tenant.register(TenantId.generate(), "Acme Corp")
        mock_session.execute.return_value = _result(None)

        await repository.save(tenant)

        assert len(tenant.collect_events()) == 1


class TestGetById:
    """Tests for get_by_id method."""

    @pytest.mark.asyncio
    async def test_rehydrates_tenant(self, repository, mock_session):
        tenant_id = TenantId.generate()
        created = datetime(2024, 1, 15, 10, 30)
        mock_session.execute.return_value = _result(
            TenantModel(
                id=str(tenant_id),
                name="Acme Corp",
                status="SUSPENDED",
                creation_date=created,
            )
        )

        tenant = await repository.get_by_id(tenant_id)

        assert tenant is not None
        assert tenant.id == tenant_id
        assert tenant.status == TenantStatus.SUSPENDED
        assert tenant.creation_date == created.replace(tzinfo=UTC)
        assert tenant.collect_events() == []

    @pytest.mark.asyncio
    async def test_returns_none_when_missing(self, repository, mock_session):
        mock_session.execute.return_value = _result(None)

        assert await repository.get_by_id(TenantId.generate()) is None


class TestExistsByName:
    @pytest.mark.asyncio
    async def test_true_when_row_found(self, repository, mock_session):
        mock_session.execute.return_value = _result("some-id")

        assert await repository.exists_by_name("Acme Corp") is True

    @pytest.mark.asyncio
    async def test_false_when_no_row(self, repository, mock_session):
        mock_session.execute.return_value = _result(None)

        assert await repository.exists_by_name("Acme Corp") is False


class TestAgainstSqlite:
    """Round trips through a real (in-memory SQLite) database."""

    @pytest.mark.asyncio
    async def test_save_and_load(self, db_session):
        repository = TenantRepository(session=db_session)
        tenant = Tenant.register(TenantId.generate(), "Acme Corp")

        async with db_session.begin():
            await repository.save(tenant)

        loaded = await repository.get_by_id(tenant.id)

        assert loaded is not None
        assert loaded.name == "Acme Corp"
        assert loaded.status == TenantStatus.ACTIVE
        assert loaded.creation_date == tenant.creation_date
        assert await repository.exists_by_name("Acme Corp")
        assert not await repository.exists_by_name("Globex")

    @pytest.mark.asyncio
    async def test_unique_index_rejects_second_tenant_with_same_name(
        self, session_factory
    ):
        async with session_factory() as session, session.begin():
            await TenantRepository(session).save(
                Tenant.register(TenantId.generate(), "Acme Corp")
            )

        async with session_factory() as session:
            with pytest.raises(DuplicateTenantNameError):
                async with session.begin():
                    await TenantRepository(session).save(
                        Tenant.register(TenantId.generate(), "Acme Corp")
                    )

    @pytest.mark.asyncio
    async def test_names_differing_in_case_are_distinct(self, session_factory):
        async with session_factory() as session, session.begin():
            await TenantRepository(session).save(
                Tenant.register(TenantId.generate(), "Acme Corp")
            )

        async with session_factory() as session, session.begin():
            repository = TenantRepository(session)
            assert not await repository.exists_by_name("acme corp")
            await repository.save(Tenant.register(TenantId.generate(), "acme corp"))
