"""Parser for the OpenSSH known-hosts registry.

Each line reads ``host[,alias...] keytype key-data [comment]``. Hashed host
fields cannot be reversed and are skipped, as are markers (``@revoked``,
``@cert-authority``), wildcard patterns and anything malformed.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from sshm.domain.discovery.candidates import DiscoveryCandidate, candidate_name
from sshm.domain.model import DEFAULT_SSH_PORT, EvidenceSource

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

log = logging.getLogger(__name__)

_BRACKETED_HOST = re.compile(r"^\[([^\]]+)\]:(\d+)$")
_WILDCARD_CHARS = frozenset("*?!")
_MIN_FIELDS = 3


@dataclass(frozen=True, slots=True)
class KnownHostEntry:
    hostname: str
    key_type: str
    port: int = DEFAULT_SSH_PORT
    aliases: tuple[str, ...] = ()

    @property
    def names(self) -> tuple[str, ...]:
        return (self.hostname, *self.aliases)


def _split_host_pattern(pattern: str) -> tuple[str, int] | None:
    if pattern.startswith("["):
        match = _BRACKETED_HOST.match(pattern)
        if match is None:
            return None
        return match.group(1), int(match.group(2))
    if any(char in _WILDCARD_CHARS for char in pattern):
        return None
    return pattern, DEFAULT_SSH_PORT


def _host_patterns(line: str) -> list[str] | None:
    stripped = line.strip()
    if not stripped or stripped.startswith("#"):
        return None
    fields = stripped.split()
    if len(fields) < _MIN_FIELDS or fields[0].startswith(("@", "|")):
        return None
    return [pattern for pattern in fields[0].split(",") if pattern]


def parse_known_hosts_line(line: str) -> KnownHostEntry | None:
    """Parse one registry line, returning ``None`` for anything unusable."""

    patterns = _host_patterns(line)
    if not patterns:
        return None

    hosts = [parsed for parsed in map(_split_host_pattern, patterns) if parsed is not None]
    if not hosts:
        log.debug("Skipping known_hosts line without usable host: %r", line.strip()[:80])
        return None

    hostname, port = hosts[0]
    aliases = tuple(dict.fromkeys(name for name, _ in hosts[1:] if name != hostname))
    return KnownHostEntry(
        hostname=hostname,
        key_type=line.split()[1],
        port=port,
        aliases=aliases,
    )


def parse_known_hosts(lines: Iterable[str]) -> list[KnownHostEntry]:
    entries: list[KnownHostEntry] = []
    for line in lines:
        entry = parse_known_hosts_line(line)
        if entry is not None:
            entries.append(entry)
    return entries


def candidates_from_known_hosts(
    entries: Iterable[KnownHostEntry],
    resolve_username: Callable[[str], str],
) -> list[DiscoveryCandidate]:
    return [
        DiscoveryCandidate(
            name=candidate_name(entry.hostname),
            hostname=entry.hostname,
            username=resolve_username(entry.hostname),
            port=entry.port,
            source=EvidenceSource.KNOWN_HOSTS,
            key_type=entry.key_type,
        )
        for entry in entries
    ]


def line_refers_to(line: str, hostname: str, port: int) -> bool:
    """Return True when a registry line lists ``hostname`` or ``[hostname]:port``."""

    patterns = _host_patterns(line)
    if not patterns:
        return False
    return hostname in patterns or f"[{hostname}]:{port}" in patterns
