"""Host directory domain model."""

from __future__ import annotations

from .enums import EvidenceSource
from .host import HostProfile, validate_profile
from .primitives import (
    DEFAULT_SSH_PORT,
    MAX_PORT,
    MIN_PORT,
    HostId,
    Port,
    join_tags,
    normalize_port,
    parse_tags,
)

__all__ = [
    "DEFAULT_SSH_PORT",
    "MAX_PORT",
    "MIN_PORT",
    "EvidenceSource",
    "HostId",
    "HostProfile",
    "Port",
    "join_tags",
    "normalize_port",
    "parse_tags",
    "validate_profile",
]
