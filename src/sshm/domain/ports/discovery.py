"""Ports for gathering discovery evidence from the user's environment."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable


@dataclass(slots=True, frozen=True)
class Evidence:
    """Raw text artifacts that discovery parses.

    Each history file is kept separately so lookups can stop at the first
    file that answers.
    """

    known_hosts: tuple[str, ...] = ()
    ssh_config: tuple[str, ...] = ()
    shell_histories: tuple[tuple[str, ...], ...] = field(default_factory=tuple)


@runtime_checkable
class EvidenceFetcher(Protocol):
    """Callable port returning the current evidence snapshot."""

    def __call__(self) -> Evidence: ...


@runtime_checkable
class KnownHostsPurger(Protocol):
    """Removes registry entries for a host; returns the number of lines dropped."""

    def __call__(self, hostname: str, port: int) -> int: ...


NameLookup = Callable[[str], list[str]]
"""Resolve a hostname to literal addresses; raise ``OSError`` when it cannot."""
