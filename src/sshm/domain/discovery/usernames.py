"""Username resolution chain: client config, then history, then fallback."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from sshm.domain.discovery.shell_history import ShellHistory
from sshm.domain.discovery.ssh_config import SshClientConfig

if TYPE_CHECKING:
    from sshm.domain.ports import Evidence


@dataclass(slots=True, frozen=True)
class UsernameResolver:
    fallback: str
    ssh_config: SshClientConfig = field(default_factory=SshClientConfig)
    histories: tuple[ShellHistory, ...] = ()

    @classmethod
    def from_evidence(cls, evidence: Evidence, *, fallback: str) -> UsernameResolver:
        return cls(
            fallback=fallback,
            ssh_config=SshClientConfig.parse(evidence.ssh_config),
            histories=tuple(ShellHistory.parse(lines) for lines in evidence.shell_histories),
        )

    def resolve(self, hostname: str) -> str:
        user = self.ssh_config.user_for(hostname)
        if user:
            return user
        for history in self.histories:
            user = history.user_for(hostname)
            if user:
                return user
        return self.fallback
