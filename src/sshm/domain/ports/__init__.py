"""Domain port definitions for adapters."""

from __future__ import annotations

from .discovery import Evidence, EvidenceFetcher, KnownHostsPurger, NameLookup
from .persistence import HostRepository
from .unit_of_work import (
    HostRepositories,
    HostUnitOfWork,
    RepositoryCollection,
    UnitOfWork,
)

__all__ = [
    "Evidence",
    "EvidenceFetcher",
    "HostRepositories",
    "HostRepository",
    "HostUnitOfWork",
    "KnownHostsPurger",
    "NameLookup",
    "RepositoryCollection",
    "UnitOfWork",
]
