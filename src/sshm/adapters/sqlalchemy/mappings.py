"""SQLAlchemy table metadata for the host directory."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from sqlalchemy import (
    Column,
    DateTime,
    Dialect,
    Integer,
    MetaData,
    String,
    Table,
    TypeDecorator,
    UniqueConstraint,
)

from sshm.domain.model import DEFAULT_SSH_PORT, HostProfile

if TYPE_CHECKING:
    from collections.abc import Mapping


class UTCDateTime(TypeDecorator[datetime]):
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value.astimezone(UTC)

    def process_result_value(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        return value if value.tzinfo else value.replace(tzinfo=UTC)


metadata = MetaData(
    naming_convention={
        "ix": "ix_%(column_0_label)s",
        "uq": "uq_%(table_name)s_%(column_0_label)s",
        "ck": "ck_%(table_name)s_%(constraint_name)s",
        "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
        "pk": "pk_%(table_name)s",
    }
)

# ids are assigned by the repository and compacted on delete
host_table = Table(
    "host",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=False),
    Column("name", String, nullable=False),
    Column("hostname", String, nullable=False),
    Column("ip_address", String, nullable=True),
    Column("port", Integer, nullable=False, default=DEFAULT_SSH_PORT),
    Column("username", String, nullable=False),
    Column("key_path", String, nullable=True),
    Column("description", String, nullable=True),
    Column("tags", String, nullable=True),
    Column("last_used", UTCDateTime(), nullable=True),
    Column("use_count", Integer, nullable=False, default=0),
    Column("created_at", UTCDateTime(), nullable=False),
    Column("updated_at", UTCDateTime(), nullable=False),
    UniqueConstraint("name"),
)

# columns a user (or enrichment) may change through an update
EDITABLE_COLUMNS: tuple[str, ...] = (
    "name",
    "hostname",
    "ip_address",
    "port",
    "username",
    "key_path",
    "description",
    "tags",
)


def profile_from_row(row: Mapping[str, Any]) -> HostProfile:
    return HostProfile(
        id=row["id"],
        name=row["name"],
        hostname=row["hostname"],
        ip_address=row["ip_address"],
        port=row["port"],
        username=row["username"],
        key_path=row["key_path"],
        description=row["description"],
        tags=row["tags"],
        last_used=row["last_used"],
        use_count=row["use_count"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def editable_values(profile: HostProfile) -> dict[str, object]:
    return {column: getattr(profile, column) for column in EDITABLE_COLUMNS}

