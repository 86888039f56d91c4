"""Unit tests for the in-memory repositories and read model."""

import pytest

from iam.domain.aggregates import Tenant, User
from iam.domain.value_objects import Email, Role, TenantId, UserId
from iam.infrastructure.in_memory import (
    InMemoryTenantReadModel,
    InMemoryTenantRepository,
    InMemoryUserRepository,
)
from iam.ports.exceptions import DuplicateEmailError, DuplicateTenantNameError
from iam.ports.read_models import ITenantReadModel, MembershipRow
from iam.ports.repositories import ITenantRepository, IUserRepository


class TestInMemoryTenantRepository:
    def test_implements_protocol(self):
        assert isinstance(InMemoryTenantRepository(), ITenantRepository)

    @pytest.mark.asyncio
    async def test_save_and_get(self):
        repo = InMemoryTenantRepository()
        tenant = Tenant.register(TenantId.generate(), "Acme Corp")

        await repo.save(tenant)
        loaded = await repo.get_by_id(tenant.id)

        assert loaded is not None
        assert loaded.name == "Acme Corp"
        assert loaded is not tenant

    @pytest.mark.asyncio
    async def test_stored_copy_carries_no_events(self):
        repo = InMemoryTenantRepository()
        tenant = Tenant.register(TenantId.generate(), "Acme Corp")

        await repo.save(tenant)
        loaded = await repo.get_by_id(tenant.id)

        assert loaded.collect_events() == []
        assert len(tenant.collect_events()) == 1

    @pytest.mark.asyncio
    async def test_name_is_unique(self):
        repo = InMemoryTenantRepository()
        await repo.save(Tenant.register(TenantId.generate(), "Acme Corp"))

        assert await repo.exists_by_name("Acme Corp")
        with pytest.raises(DuplicateTenantNameError):
            await repo.save(Tenant.register(TenantId.generate(), "Acme Corp"))

    @pytest.mark.asyncio
    async def test_names_differing_in_case_are_distinct(self):
        repo = InMemoryTenantRepository()
        await repo.save(Tenant.register(TenantId.generate(), "Acme Corp"))

        assert not await repo.exists_by_name("acme corp")
        await repo.save(Tenant.register(TenantId.generate(), "acme corp"))

        assert len(repo.list_all()) == 2

    @pytest.mark.asyncio
    async def test_resaving_same_tenant_is_allowed(self):
        repo = InMemoryTenantRepository()
        tenant = Tenant.register(TenantId.generate(), "Acme Corp")
        await repo.save(tenant)

        tenant.suspend()
        await repo.save(tenant)

        assert len(repo.list_all()) == 1
        assert not (await repo.get_by_id(tenant.id)).is_active

    @pytest.mark.asyncio
    async def test_mutating_loaded_copy_does_not_change_store(self):
        repo = InMemoryTenantRepository()
        tenant = Tenant.register(TenantId.generate(), "Acme Corp")
        await repo.save(tenant)

        loaded = await repo.get_by_id(tenant.id)
        loaded.suspend()

        assert (await repo.get_by_id(tenant.id)).is_active


class TestInMemoryUserRepository:
    def test_implements_protocol(self):
        assert isinstance(InMemoryUserRepository(), IUserRepository)

    @pytest.mark.asyncio
    async def test_get_by_email_and_id(self):
        repo = InMemoryUserRepository()
        user = User.register(UserId.generate(), "kc-1", Email("john@example.com"))
        await repo.save(user)

        assert await repo.get_by_email(Email("john@example.com")) == user
        assert await repo.get_by_id(user.id) == user
        assert await repo.get_by_email(Email("jane@example.com")) is None

    @pytest.mark.asyncio
    async def test_email_is_unique(self):
        repo = InMemoryUserRepository()
        await repo.save(
            User.register(UserId.generate(), "kc-1", Email("john@example.com"))
        )

        with pytest.raises(DuplicateEmailError):
            await repo.save(
                User.register(UserId.generate(), "kc-2", Email("john@example.com"))
            )

    @pytest.mark.asyncio
    async def test_memberships_need_a_save_to_persist(self):
        repo = InMemoryUserRepository()
        tenant_id = TenantId.generate()
        user = User.register(UserId.generate(), "kc-1", Email("john@example.com"))
        await repo.save(user)

        user.add_to_tenant(tenant_id, Role.ADMIN)
        assert not (await repo.get_by_id(user.id)).is_member_of(tenant_id)

        await repo.save(user)
        assert (await repo.get_by_id(user.id)).is_member_of(tenant_id)


class TestInMemoryTenantReadModel:
    @pytest.mark.asyncio
    async def test_projects_rows(self):
        tenants = InMemoryTenantRepository()
        users = InMemoryUserRepository()
        read_model = InMemoryTenantReadModel(tenants, users)
        tenant = Tenant.register(TenantId.generate(), "Acme Corp")
        await tenants.save(tenant)
        user = User.register(UserId.generate(), "kc-1", Email("john@example.com"))
        user.add_to_tenant(tenant.id, Role.MEMBER)
        user.add_to_tenant(tenant.id, Role.ADMIN)
        await users.save(user)

        row = await read_model.get_tenant_row(tenant.id)
        rows = await read_model.list_membership_rows(tenant.id)

        assert isinstance(read_model, ITenantReadModel)
        assert row.name == "Acme Corp"
        assert row.status == "ACTIVE"
        assert rows == [
            MembershipRow(
                user_email="john@example.com",
                tenant_id=str(tenant.id),
                roles="ADMIN,MEMBER",
            )
        ]

    @pytest.mark.asyncio
    async def test_unknown_tenant(self):
        read_model = InMemoryTenantReadModel(
            InMemoryTenantRepository(), InMemoryUserRepository()
        )

        assert await read_model.get_tenant_row(TenantId.generate()) is None
        assert await read_model.list_membership_rows(TenantId.generate()) == []
