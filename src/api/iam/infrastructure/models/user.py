"""SQLAlchemy ORM models for the users and user_memberships tables.

A user row carries the provider reference and email. Each tenant
membership is a child row whose roles column holds the role names
joined into a single string.
"""

from __future__ import annotations

import uuid

from sqlalchemy import ForeignKey, Index, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from infrastructure.database.models import Base, TimestampMixin


def _new_membership_id() -> str:
    return str(uuid.uuid4())


class UserModel(Base, TimestampMixin):
    """ORM model for users table.

    Note: external_id is the opaque reference returned by the identity
    provider, not a credential.
    """

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    external_id: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False)

    memberships: Mapped[list[UserMembershipModel]] = relationship(
        back_populates="user",
        cascade="all, delete-orphan",
        order_by="UserMembershipModel.tenant_id",
    )

    __table_args__ = (Index("ix_users_email", "email", unique=True),)

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<UserModel(id={self.id}, email={self.email})>"


class UserMembershipModel(Base, TimestampMixin):
    """ORM model for user_memberships table.

    Foreign Key Constraints:
    - user_id references users.id with CASCADE delete

    Unique Constraint:
    - One row per (user_id, tenant_id)
    """

    __tablename__ = "user_memberships"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=_new_membership_id
    )
    user_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    tenant_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    roles: Mapped[str] = mapped_column(String(1024), nullable=False)

    user: Mapped[UserModel] = relationship(back_populates="memberships")

    __table_args__ = (
        UniqueConstraint(
            "user_id", "tenant_id", name="uq_user_memberships_user_tenant"
        ),
    )

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"<UserMembershipModel(user_id={self.user_id}, "
            f"tenant_id={self.tenant_id}, roles={self.roles})>"
        )
