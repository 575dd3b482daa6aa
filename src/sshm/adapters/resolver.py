"""System name lookup bounded by a timeout."""

from __future__ import annotations

import socket
import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any


@dataclass(frozen=True, slots=True)
class SystemNameLookup:
    """Resolve a hostname through ``getaddrinfo``.

    Raises ``OSError`` (``TimeoutError`` included) when the lookup fails or
    does not answer within ``timeout_seconds``. The lookup runs on a daemon
    thread; a call that outlives the timeout keeps running in the background
    but never holds up interpreter exit.
    """

    timeout_seconds: float

    def __call__(self, hostname: str) -> list[str]:
        infos: list[tuple[Any, ...]] = []
        errors: list[OSError] = []

        def lookup() -> None:
            try:
                infos.extend(socket.getaddrinfo(hostname, None, proto=socket.IPPROTO_TCP))
            except OSError as exc:
                errors.append(exc)

        worker = threading.Thread(target=lookup, name="sshm-lookup", daemon=True)
        worker.start()
        worker.join(self.timeout_seconds)
        if worker.is_alive():
            raise TimeoutError(f"Lookup of {hostname} timed out after {self.timeout_seconds}s")
        if errors:
            raise errors[0]
        return list(dict.fromkeys(str(info[4][0]) for info in infos))


if TYPE_CHECKING:
    from sshm.domain.ports import NameLookup

    _lookup_check: NameLookup = SystemNameLookup(1.0)
