from __future__ import annotations

from typing import TYPE_CHECKING, Never

import pytest

from sshm.adapters.sqlalchemy.repositories import SqlAlchemyHostRepository
from sshm.domain.discovery import DiscoveryCandidate
from sshm.domain.errors import StorageError
from sshm.domain.model import EvidenceSource
from sshm.domain.reconciliation import ReconcileResult, ReconciliationEngine
from tests.helpers.hosts import FALLBACK_USERNAME, make_host

if TYPE_CHECKING:
    from sqlalchemy.orm import Session

    from sshm.domain.model import HostProfile


def _candidate(name: str, *, username: str = "alice", port: int = 22) -> DiscoveryCandidate:
    return DiscoveryCandidate(
        name=name,
        hostname=f"{name}.example.com",
        username=username,
        port=port,
        source=EvidenceSource.KNOWN_HOSTS,
        key_type="ssh-rsa",
    )


def _engine(address: str = "") -> ReconciliationEngine:
    return ReconciliationEngine(
        fallback_username=FALLBACK_USERNAME,
        discovery_tag="ssh-detected",
        resolve_address=lambda _hostname: address,
    )


def test_reconcile_counts_each_outcome(sqlite_session: Session) -> None:
    hosts = SqlAlchemyHostRepository(sqlite_session)
    hosts.add(make_host("old", username=FALLBACK_USERNAME))
    hosts.add(make_host("kept", username="bob", ip_address="192.0.2.5"))

    result = _engine().reconcile(
        [_candidate("new"), _candidate("old"), _candidate("kept")],
        hosts=hosts,
    )

    assert result == ReconcileResult(created=1, enriched=1, skipped=1)
    assert hosts.get_by_name("new").tags == "ssh-detected"
    assert hosts.get_by_name("old").username == "alice"
    assert hosts.get_by_name("kept").username == "bob"


def test_same_name_twice_in_one_run_creates_once(sqlite_session: Session) -> None:
    hosts = SqlAlchemyHostRepository(sqlite_session)

    result = _engine().reconcile(
        [_candidate("box"), _candidate("box", port=2222)],
        hosts=hosts,
    )

    assert result.created == 1
    assert hosts.get_by_name("box").port == 22


def test_invalid_candidate_is_skipped_not_fatal(sqlite_session: Session) -> None:
    hosts = SqlAlchemyHostRepository(sqlite_session)

    result = _engine().reconcile(
        [_candidate("broken", username=""), _candidate("fine")],
        hosts=hosts,
    )

    assert (result.created, result.skipped) == (1, 1)
    assert [host.name for host in hosts.list_all()] == ["fine"]


class _BrokenRepository:
    def find_by_name(self, name: str) -> HostProfile | None:
        _ = name

    def add(self, profile: HostProfile) -> Never:
        raise StorageError(f"disk full while adding {profile.name}")


def test_storage_errors_propagate() -> None:
    with pytest.raises(StorageError):
        _engine().reconcile(
            [_candidate("box")],
            hosts=_BrokenRepository(),  # type: ignore[arg-type]
        )
