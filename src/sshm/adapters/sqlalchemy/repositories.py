"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from sshm.adapters.sqlalchemy.mappings import editable_values, host_table, profile_from_row
from sshm.domain.errors import ConflictError, NotFoundError, StorageError
from sshm.domain.model import validate_profile

if TYPE_CHECKING:
    from collections.abc import Callable

    from sqlalchemy import Executable, Result, Select
    from sqlalchemy.orm import Session

    from sshm.domain.model import HostProfile

_SEARCH_FIELDS = ("name", "hostname", "ip_address", "description", "tags")


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


def _matches(profile: HostProfile, needle: str) -> bool:
    return any(needle in (getattr(profile, field) or "").casefold() for field in _SEARCH_FIELDS)


class SqlAlchemyHostRepository:
    """Host directory table with dense, 1-based identifiers.

    Identifiers are assigned as ``max(id) + 1`` and compacted on every delete,
    so the next id is always ``count + 1``. All statements run on the caller's
    session; the unit of work decides when they are committed.
    """

    def __init__(self, session: Session, *, clock: Callable[[], datetime] = _utcnow) -> None:
        self.session = session
        self._clock = clock

    def add(self, profile: HostProfile) -> HostProfile:
        validate_profile(profile)
        if self.find_by_name(profile.name) is not None:
            raise ConflictError(profile.name)

        now = self._clock()
        host_id = self._next_id()
        statement = host_table.insert().values(
            id=host_id,
            use_count=0,
            last_used=None,
            created_at=now,
            updated_at=now,
            **editable_values(profile),
        )
        self._execute(statement, conflict_name=profile.name)

        profile.id = host_id
        profile.use_count = 0
        profile.last_used = None
        profile.created_at = now
        profile.updated_at = now
        return profile

    def list_all(self) -> list[HostProfile]:
        return self._fetch(self._ordered(select(host_table)))

    def get(self, host_id: int) -> HostProfile:
        rows = self._fetch(select(host_table).where(host_table.c.id == host_id))
        if not rows:
            raise NotFoundError(host_id=host_id)
        return rows[0]

    def get_by_name(self, name: str) -> HostProfile:
        profile = self.find_by_name(name)
        if profile is None:
            raise NotFoundError(name=name)
        return profile

    def find_by_name(self, name: str) -> HostProfile | None:
        rows = self._fetch(select(host_table).where(host_table.c.name == name))
        return rows[0] if rows else None

    def update(self, profile: HostProfile) -> HostProfile:
        validate_profile(profile)
        if profile.id is None:
            raise NotFoundError(host_id=None)
        stored = self.get(profile.id)
        owner = self.find_by_name(profile.name)
        if owner is not None and owner.id != profile.id:
            raise ConflictError(profile.name)

        now = self._clock()
        statement = (
            host_table.update()
            .where(host_table.c.id == profile.id)
            .values(updated_at=now, **editable_values(profile))
        )
        self._execute(statement, conflict_name=profile.name)

        profile.created_at = stored.created_at
        profile.use_count = stored.use_count
        profile.last_used = stored.last_used
        profile.updated_at = now
        return profile

    def remove(self, host_id: int) -> HostProfile:
        """Delete a host and renumber the remaining ids to stay contiguous."""

        profile = self.get(host_id)
        self._execute(host_table.delete().where(host_table.c.id == host_id))
        self._compact_ids()
        return profile

    def search(self, query: str) -> list[HostProfile]:
        """Substring match over the text fields, folded with ``str.casefold``.

        SQLite's ``lower()`` only folds ASCII letters, so matching runs in Python.
        """

        needle = query.strip().casefold()
        hosts = self.list_all()
        if not needle:
            return hosts
        return [host for host in hosts if _matches(host, needle)]

    def increment_use(self, host_id: int) -> None:
        statement = (
            host_table.update()
            .where(host_table.c.id == host_id)
            .values(use_count=host_table.c.use_count + 1, last_used=self._clock())
        )
        result = self._execute(statement)
        if result.rowcount == 0:  # pyright: ignore[reportAttributeAccessIssue]
            raise NotFoundError(host_id=host_id)

    def count(self) -> int:
        statement = select(func.count()).select_from(host_table)
        return int(self._execute(statement).scalar_one())

    def _compact_ids(self) -> None:
        # ascending order guarantees every target id is already free
        statement = select(host_table.c.id).order_by(host_table.c.id)
        current_ids = list(self._execute(statement).scalars())
        for new_id, current_id in enumerate(current_ids, start=1):
            if current_id == new_id:
                continue
            self._execute(
                host_table.update().where(host_table.c.id == current_id).values(id=new_id)
            )

    def _next_id(self) -> int:
        statement = select(func.coalesce(func.max(host_table.c.id), 0) + 1)
        return int(self._execute(statement).scalar_one())

    @staticmethod
    def _ordered(statement: Select[tuple[object, ...]]) -> Select[tuple[object, ...]]:
        # most recently used first, never used last, name breaks ties
        return statement.order_by(
            host_table.c.last_used.is_(None),
            host_table.c.last_used.desc(),
            host_table.c.name,
        )

    def _fetch(self, statement: Select[tuple[object, ...]]) -> list[HostProfile]:
        result = self._execute(statement)
        return [profile_from_row(row) for row in result.mappings()]

    def _execute(
        self,
        statement: Executable,
        *,
        conflict_name: str | None = None,
    ) -> Result[tuple[object, ...]]:
        try:
            return self.session.execute(statement)
        except IntegrityError as exc:
            if conflict_name is not None:
                raise ConflictError(conflict_name) from exc
            raise StorageError(f"Integrity violation: {exc.orig}") from exc
        except SQLAlchemyError as exc:
            raise StorageError(f"Database operation failed: {exc}") from exc


if TYPE_CHECKING:
    from typing import cast

    from sshm.domain.ports.persistence import HostRepository

    _session_stub = cast("Session", object())
    _repo_check: HostRepository = SqlAlchemyHostRepository(_session_stub)
