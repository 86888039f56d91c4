"""Database infrastructure - async SQLAlchemy engines, sessions and base model."""

from infrastructure.database.dependencies import (
    close_database_connections,
    get_read_session,
    get_write_session,
)
from infrastructure.database.models import Base, TimestampMixin, ensure_utc

__all__ = [
    "Base",
    "TimestampMixin",
    "close_database_connections",
    "ensure_utc",
    "get_read_session",
    "get_write_session",
]
