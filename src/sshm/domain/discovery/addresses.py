"""Best-effort hostname to address resolution."""

from __future__ import annotations

import ipaddress
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from sshm.domain.discovery.known_hosts import KnownHostEntry
    from sshm.domain.ports import NameLookup

log = logging.getLogger(__name__)


def is_ip_literal(value: str) -> bool:
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return False
    return True


def prefer_ipv4(addresses: Iterable[str]) -> str:
    first = ""
    for address in addresses:
        try:
            parsed = ipaddress.ip_address(address)
        except ValueError:
            continue
        if parsed.version == 4:  # noqa: PLR2004
            return address
        first = first or address
    return first


@dataclass(slots=True)
class AddressResolver:
    """Resolve hostnames without ever raising.

    Order: literal IP passthrough, a literal IP listed next to the hostname in
    known_hosts, the system lookup (IPv4 preferred), then the empty string.
    """

    known_hosts: Sequence[KnownHostEntry] = ()
    lookup: NameLookup | None = None

    def resolve(self, hostname: str) -> str:
        if not hostname:
            return ""
        if is_ip_literal(hostname):
            return hostname

        address = self._from_known_hosts(hostname)
        if address:
            return address

        if self.lookup is None:
            return ""
        try:
            addresses = self.lookup(hostname)
        except OSError as exc:
            log.debug("Address lookup for %s failed: %s", hostname, exc)
            return ""
        return prefer_ipv4(addresses)

    def _from_known_hosts(self, hostname: str) -> str:
        for entry in self.known_hosts:
            if hostname not in entry.names:
                continue
            for name in entry.names:
                if is_ip_literal(name):
                    return name
        return ""
