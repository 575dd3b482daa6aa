"""Application wiring: adapters in, directory service out."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from sshm.adapters.resolver import SystemNameLookup
from sshm.adapters.sqlalchemy.unit_of_work import SqlAlchemyHostUnitOfWork, is_started, startup
from sshm.adapters.ssh_files import KnownHostsFile, LocalEvidenceFetcher
from sshm.config import get_discovery_config
from sshm.domain.directory import DirectoryService
from sshm.domain.discovery import DiscoverySettings

if TYPE_CHECKING:
    from sshm.config import DiscoveryConfig

log = getLogger(__name__)


def discovery_settings(config: DiscoveryConfig) -> DiscoverySettings:
    return DiscoverySettings(
        fallback_username=config.fallback_username,
        preferred_key_type=config.preferred_key_type,
        discovery_tag=config.discovery_tag,
    )


def build_directory_service(
    *,
    database_uri: str | None = None,
    discovery_config: DiscoveryConfig | None = None,
    resolve_addresses: bool = True,
) -> DirectoryService:
    """Start the storage adapter (once) and assemble a ``DirectoryService``."""

    if not is_started():
        startup(database_uri=database_uri)
    config = discovery_config or get_discovery_config()
    log.debug("Using SSH directory %s", config.ssh_dir)

    return DirectoryService(
        unit_of_work_factory=SqlAlchemyHostUnitOfWork,
        settings=discovery_settings(config),
        evidence_fetcher=LocalEvidenceFetcher.from_config(config),
        name_lookup=SystemNameLookup(config.resolve_timeout_seconds) if resolve_addresses else None,
        known_hosts_purger=KnownHostsFile(config.known_hosts_path),
    )
