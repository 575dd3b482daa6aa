"""Evidence to merged candidates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from sshm.domain.discovery.known_hosts import candidates_from_known_hosts, parse_known_hosts
from sshm.domain.discovery.merge import merge_candidates
from sshm.domain.discovery.usernames import UsernameResolver

if TYPE_CHECKING:
    from sshm.domain.discovery.candidates import DiscoveryCandidate
    from sshm.domain.discovery.known_hosts import KnownHostEntry
    from sshm.domain.ports import Evidence


@dataclass(frozen=True, slots=True, kw_only=True)
class DiscoverySettings:
    fallback_username: str
    preferred_key_type: str
    discovery_tag: str


@dataclass(frozen=True, slots=True)
class DiscoveryBatch:
    candidates: list[DiscoveryCandidate]
    known_hosts: list[KnownHostEntry]


def discover_candidates(evidence: Evidence, settings: DiscoverySettings) -> DiscoveryBatch:
    entries = parse_known_hosts(evidence.known_hosts)
    usernames = UsernameResolver.from_evidence(evidence, fallback=settings.fallback_username)
    candidates = candidates_from_known_hosts(entries, usernames.resolve)
    return DiscoveryBatch(
        candidates=merge_candidates(candidates, preferred_key_type=settings.preferred_key_type),
        known_hosts=entries,
    )
