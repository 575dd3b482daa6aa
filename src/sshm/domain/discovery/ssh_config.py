"""Username lookup in the OpenSSH client configuration."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

# "Key value", "Key=value" and "Key = value" are all accepted by ssh
_DIRECTIVE = re.compile(r"^(\S+?)(?:\s*=\s*|\s+)(.*)$")


@dataclass(slots=True)
class SshConfigStanza:
    patterns: str
    hostname: str | None = None
    user: str | None = None

    def matches(self, hostname: str) -> bool:
        # pattern text equal to or containing the name, or a matching HostName
        return (
            self.patterns == hostname
            or hostname in self.patterns
            or self.hostname == hostname
        )


@dataclass(slots=True, frozen=True)
class SshClientConfig:
    stanzas: tuple[SshConfigStanza, ...] = field(default_factory=tuple)

    @classmethod
    def parse(cls, lines: Iterable[str]) -> SshClientConfig:
        stanzas: list[SshConfigStanza] = []
        current: SshConfigStanza | None = None
        for line in lines:
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            match = _DIRECTIVE.match(stripped)
            if match is None:
                continue
            keyword = match.group(1).lower()
            value = match.group(2).strip().strip('"')
            if keyword == "host":
                current = SshConfigStanza(patterns=value)
                stanzas.append(current)
            elif keyword == "match":
                # conditions cannot be evaluated offline
                current = None
            elif current is None or not value:
                continue
            elif keyword == "hostname" and current.hostname is None:
                current.hostname = value
            elif keyword == "user" and current.user is None:
                current.user = value
        return cls(stanzas=tuple(stanzas))

    def user_for(self, hostname: str) -> str | None:
        """Return ``User`` of the first stanza matching ``hostname``."""

        if not hostname:
            return None
        for stanza in self.stanzas:
            if stanza.user and stanza.matches(hostname):
                return stanza.user
        return None
