"""Unit tests for User aggregate."""

import pytest

from iam.domain.aggregates import User
from iam.domain.exceptions import ValidationError
from iam.domain.value_objects import Email, Role, TenantId, UserId


@pytest.fixture
def user() -> User:
    return User.register(
        user_id=UserId.generate(),
        external_id="kc-123",
        email=Email("john@example.com"),
    )


class TestUserRegistration:
    """Tests for User.register()."""

    def test_registers_without_memberships(self, user):
        assert user.external_id == "kc-123"
        assert user.email == Email("john@example.com")
        assert dict(user.memberships) == {}

    @pytest.mark.parametrize("external_id", [None, "", "  "])
    def test_rejects_blank_external_id(self, external_id):
        with pytest.raises(ValidationError):
            User.register(
                user_id=UserId.generate(),
                external_id=external_id,
                email=Email("john@example.com"),
            )


class TestAddToTenant:
    """Tests for membership management."""

    def test_first_role_creates_membership(self, user):
        tenant_id = TenantId.generate()

        user.add_to_tenant(tenant_id, Role.ADMIN)

        assert user.is_member_of(tenant_id)
        assert user.roles_for_tenant(tenant_id) == frozenset({Role.ADMIN})

    def test_second_role_extends_existing_membership(self, user):
        tenant_id = TenantId.generate()

        user.add_to_tenant(tenant_id, Role.ADMIN)
        user.add_to_tenant(tenant_id, Role.MEMBER)

        assert len(user.memberships) == 1
        assert user.roles_for_tenant(tenant_id) == frozenset(
            {Role.ADMIN, Role.MEMBER}
        )

    def test_repeating_a_role_is_noop(self, user):
        tenant_id = TenantId.generate()

        user.add_to_tenant(tenant_id, Role.ADMIN)
        user.add_to_tenant(tenant_id, Role.ADMIN)

        assert user.roles_for_tenant(tenant_id) == frozenset({Role.ADMIN})

    def test_memberships_are_kept_per_tenant(self, user):
        t1, t2 = TenantId.generate(), TenantId.generate()

        user.add_to_tenant(t1, Role.ADMIN)
        user.add_to_tenant(t1, Role.MEMBER)
        user.add_to_tenant(t2, Role.ADMIN)

        assert dict(user.memberships) == {
            t1: frozenset({Role.ADMIN, Role.MEMBER}),
            t2: frozenset({Role.ADMIN}),
        }

    def test_roles_for_unknown_tenant_is_empty(self, user):
        tenant_id = TenantId.generate()

        assert user.roles_for_tenant(tenant_id) == frozenset()
        assert not user.is_member_of(tenant_id)

    def test_memberships_snapshot_is_read_only(self, user):
        tenant_id = TenantId.generate()
        user.add_to_tenant(tenant_id, Role.ADMIN)

        with pytest.raises(TypeError):
            user.memberships[TenantId.generate()] = frozenset()  # type: ignore[index]


class TestUserEquality:
    """Users are identified by id."""

    def test_same_id_is_equal(self):
        user_id = UserId.generate()
        a = User.register(user_id, "kc-1", Email("a@example.com"))
        b = User.register(user_id, "kc-2", Email("b@example.com"))

        assert a == b
        assert hash(a) == hash(b)

    def test_different_id_is_not_equal(self):
        a = User.register(UserId.generate(), "kc-1", Email("a@example.com"))
        b = User.register(UserId.generate(), "kc-1", Email("a@example.com"))

        assert a != b
