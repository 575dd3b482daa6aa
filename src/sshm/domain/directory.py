"""Directory service: the single entry point for host operations.

Every mutating call is serialized by one re-entrant lock, so a discovery run
never interleaves with an edit or a delete.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from sshm.domain.discovery import AddressResolver, discover_candidates, parse_known_hosts
from sshm.domain.errors import ConflictError, NotFoundError, ValidationError
from sshm.domain.model import DEFAULT_SSH_PORT, HostProfile, validate_profile
from sshm.domain.ports import Evidence
from sshm.domain.reconciliation import ReconciliationEngine

if TYPE_CHECKING:
    from collections.abc import Callable

    from sshm.domain.discovery import DiscoverySettings
    from sshm.domain.ports import EvidenceFetcher, HostUnitOfWork, KnownHostsPurger, NameLookup

log = logging.getLogger(__name__)


def _no_evidence() -> Evidence:
    return Evidence()


def check_key_path(key_path: str | None) -> None:
    if key_path and not Path(key_path).expanduser().exists():
        raise ValidationError(f"SSH key file not found: {key_path}")


@dataclass(slots=True, kw_only=True)
class DirectoryService:
    unit_of_work_factory: Callable[[], HostUnitOfWork]
    settings: DiscoverySettings
    evidence_fetcher: EvidenceFetcher = _no_evidence
    name_lookup: NameLookup | None = None
    known_hosts_purger: KnownHostsPurger | None = None
    _lock: threading.RLock = field(default_factory=threading.RLock, init=False, repr=False)

    def list_hosts(self) -> list[HostProfile]:
        with self.unit_of_work_factory() as uow:
            return uow.repositories.hosts.list_all()

    def get_host(self, id_or_name: int | str) -> HostProfile:
        """Look a host up by id, or by name; numeric text is tried as an id first."""

        with self.unit_of_work_factory() as uow:
            hosts = uow.repositories.hosts
            if isinstance(id_or_name, int):
                return hosts.get(id_or_name)
            text = id_or_name.strip()
            if not text.isdigit():
                return hosts.get_by_name(text)
            try:
                return hosts.get(int(text))
            except NotFoundError:
                profile = hosts.find_by_name(text)
                if profile is None:
                    raise
                return profile

    def add_host(
        self,
        name: str,
        hostname: str,
        username: str,
        port: int = DEFAULT_SSH_PORT,
        key_path: str | None = None,
        description: str | None = None,
        tags: str | None = None,
    ) -> HostProfile:
        check_key_path(key_path)
        profile = HostProfile(
            name=name,
            hostname=hostname,
            username=username,
            port=port,
            key_path=key_path or None,
            description=description or None,
            tags=tags or None,
        )
        validate_profile(profile)
        with self._lock:
            with self.unit_of_work_factory() as uow:
                if uow.repositories.hosts.find_by_name(profile.name) is not None:
                    raise ConflictError(profile.name)
            profile.ip_address = self._address_resolver().resolve(profile.hostname) or None
            with self.unit_of_work_factory() as uow:
                stored = uow.repositories.hosts.add(profile)
                uow.commit()
        log.info("Added host %s (id %s)", stored.name, stored.id)
        return stored

    def edit_host(self, profile: HostProfile) -> None:
        check_key_path(profile.key_path)
        profile.key_path = profile.key_path or None
        profile.description = profile.description or None
        profile.tags = profile.tags or None
        with self._lock, self.unit_of_work_factory() as uow:
            uow.repositories.hosts.update(profile)
            uow.commit()

    def remove_host(self, host_id: int, *, purge_known_hosts: bool = False) -> None:
        """Delete a host; optionally drop its known_hosts entries afterwards.

        A failed purge is logged and does not undo the deletion.
        """

        with self._lock:
            with self.unit_of_work_factory() as uow:
                removed = uow.repositories.hosts.remove(host_id)
                uow.commit()
            log.info("Removed host %s", removed.name)

            if not purge_known_hosts or self.known_hosts_purger is None:
                return
            try:
                dropped = self.known_hosts_purger(removed.hostname, removed.port)
            except (OSError, ValueError):
                log.warning(
                    "Removed host %s but could not update known_hosts",
                    removed.name,
                    exc_info=True,
                )
            else:
                log.info("Dropped %d known_hosts entries for %s", dropped, removed.hostname)

    def search_hosts(self, query: str) -> list[HostProfile]:
        with self.unit_of_work_factory() as uow:
            return uow.repositories.hosts.search(query)

    def record_connection_use(self, host_id: int) -> None:
        with self._lock, self.unit_of_work_factory() as uow:
            uow.repositories.hosts.increment_use(host_id)
            uow.commit()

    def run_discovery(self) -> int:
        """Reconcile the directory with local SSH evidence; return hosts created."""

        with self._lock:
            batch = discover_candidates(self.evidence_fetcher(), self.settings)
            if not batch.candidates:
                log.info("Discovery found no candidate hosts")
                return 0

            resolver = AddressResolver(known_hosts=batch.known_hosts, lookup=self.name_lookup)
            engine = ReconciliationEngine(
                fallback_username=self.settings.fallback_username,
                discovery_tag=self.settings.discovery_tag,
                resolve_address=resolver.resolve,
            )
            with self.unit_of_work_factory() as uow:
                result = engine.reconcile(batch.candidates, hosts=uow.repositories.hosts)
                uow.commit()

        log.info(
            "Discovery finished: candidates=%s, created=%s, enriched=%s, skipped=%s",
            len(batch.candidates),
            result.created,
            result.enriched,
            result.skipped,
        )
        return result.created

    def _address_resolver(self) -> AddressResolver:
        known_hosts = parse_known_hosts(self.evidence_fetcher().known_hosts)
        return AddressResolver(known_hosts=known_hosts, lookup=self.name_lookup)
