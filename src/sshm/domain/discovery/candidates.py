"""Unscored host inferences produced by the evidence parsers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from sshm.domain.model import DEFAULT_SSH_PORT

if TYPE_CHECKING:
    from sshm.domain.model import EvidenceSource

type IdentityKey = tuple[str, str, int]

_NAME_INVALID_CHARS = re.compile(r"[^A-Za-z0-9-]")


@dataclass(frozen=True, slots=True, kw_only=True)
class DiscoveryCandidate:
    """A possible host, pending merge and reconciliation. Never persisted as-is."""

    name: str
    hostname: str
    username: str
    source: EvidenceSource
    port: int = DEFAULT_SSH_PORT
    key_type: str | None = None

    @property
    def identity_key(self) -> IdentityKey:
        return (self.username, self.hostname, self.port)


def candidate_name(hostname: str) -> str:
    """Derive a short profile name from the first label of ``hostname``."""

    label = _NAME_INVALID_CHARS.sub("", hostname.split(".")[0])
    if label:
        return label
    return hostname.replace(".", "-")
