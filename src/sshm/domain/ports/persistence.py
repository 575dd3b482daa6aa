"""Ports for persisting host profiles."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from sshm.domain.model import HostProfile


@runtime_checkable
class HostRepository(Protocol):
    """Persistence contract for the host directory.

    Lookups raise ``NotFoundError`` for unknown ids or names; writes raise
    ``ValidationError`` or ``ConflictError`` as documented on each adapter.
    """

    def add(self, profile: HostProfile) -> HostProfile: ...

    def list_all(self) -> list[HostProfile]: ...

    def get(self, host_id: int) -> HostProfile: ...

    def get_by_name(self, name: str) -> HostProfile: ...

    def find_by_name(self, name: str) -> HostProfile | None: ...

    def update(self, profile: HostProfile) -> HostProfile: ...

    def remove(self, host_id: int) -> HostProfile: ...

    def search(self, query: str) -> list[HostProfile]: ...

    def increment_use(self, host_id: int) -> None: ...
