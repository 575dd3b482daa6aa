from __future__ import annotations

from typing import TYPE_CHECKING

from sshm.adapters.resolver import SystemNameLookup
from sshm.adapters.ssh_files import KnownHostsFile, LocalEvidenceFetcher
from sshm.app import build_directory_service
from sshm.config import DiscoveryConfig

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from sshm.adapters.sqlalchemy.unit_of_work import SqlAlchemyHostUnitOfWork


def _config(tmp_path: Path) -> DiscoveryConfig:
    return DiscoveryConfig(
        ssh_dir=tmp_path / ".ssh",
        history_files=(tmp_path / ".bash_history",),
        fallback_username="me",
        resolve_timeout_seconds=0.5,
    )


def test_build_directory_service_wires_local_adapters(
    sqlite_unit_of_work: Callable[[], SqlAlchemyHostUnitOfWork],
    tmp_path: Path,
) -> None:
    _ = sqlite_unit_of_work
    service = build_directory_service(discovery_config=_config(tmp_path))

    assert service.settings.fallback_username == "me"
    assert isinstance(service.evidence_fetcher, LocalEvidenceFetcher)
    assert service.known_hosts_purger == KnownHostsFile(tmp_path / ".ssh" / "known_hosts")
    assert service.name_lookup == SystemNameLookup(0.5)
    assert service.list_hosts() == []


def test_discovery_from_files_end_to_end(
    sqlite_unit_of_work: Callable[[], SqlAlchemyHostUnitOfWork],
    tmp_path: Path,
) -> None:
    _ = sqlite_unit_of_work
    ssh_dir = tmp_path / ".ssh"
    ssh_dir.mkdir()
    (ssh_dir / "known_hosts").write_text(
        "box.example.com,192.0.2.8 ssh-ed25519 AAAA\n[10.0.0.5]:2222 ssh-rsa BBBB\n"
    )
    (tmp_path / ".bash_history").write_text("ls\nssh alice@box\n")
    service = build_directory_service(
        discovery_config=_config(tmp_path), resolve_addresses=False
    )

    assert service.run_discovery() == 2

    box = service.get_host("box")
    assert (box.username, box.ip_address) == ("alice", "192.0.2.8")

    service.remove_host(box.id or 0, purge_known_hosts=True)

    assert (ssh_dir / "known_hosts").read_text() == "[10.0.0.5]:2222 ssh-rsa BBBB\n"
    assert [host.name for host in service.list_hosts()] == ["10"]
