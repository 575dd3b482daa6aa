"""Local OpenSSH artifacts: evidence reads and known_hosts maintenance."""

from __future__ import annotations

import logging
import os
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from sshm.domain.discovery import line_refers_to
from sshm.domain.ports import Evidence

if TYPE_CHECKING:
    from sshm.config import DiscoveryConfig

log = logging.getLogger(__name__)


def read_lines(path: Path) -> tuple[str, ...]:
    """Return the file's lines, or nothing when it cannot be read."""

    try:
        with path.open(encoding="utf-8", errors="replace") as handle:
            return tuple(handle.read().splitlines())
    except OSError as exc:
        log.debug("No evidence from %s: %s", path, exc)
        return ()


@dataclass(frozen=True, slots=True)
class LocalEvidenceFetcher:
    known_hosts_path: Path
    ssh_config_path: Path
    history_paths: tuple[Path, ...] = ()

    @classmethod
    def from_config(cls, config: DiscoveryConfig) -> LocalEvidenceFetcher:
        return cls(
            known_hosts_path=config.known_hosts_path,
            ssh_config_path=config.ssh_config_path,
            history_paths=config.history_files,
        )

    def __call__(self) -> Evidence:
        return Evidence(
            known_hosts=read_lines(self.known_hosts_path),
            ssh_config=read_lines(self.ssh_config_path),
            shell_histories=tuple(read_lines(path) for path in self.history_paths),
        )


@dataclass(frozen=True, slots=True)
class KnownHostsFile:
    """Rewrites the known_hosts file without the entries of a removed host."""

    path: Path

    def __call__(self, hostname: str, port: int) -> int:
        if not self.path.exists():
            return 0

        # surrogateescape keeps undecodable bytes intact through the rewrite
        text = self.path.read_text(encoding="utf-8", errors="surrogateescape")
        lines = text.splitlines(keepends=True)
        kept = [line for line in lines if not line_refers_to(line, hostname, port)]
        dropped = len(lines) - len(kept)
        if dropped == 0:
            return 0

        temporary = self.path.with_name(f"{self.path.name}.sshm-tmp")
        try:
            temporary.write_text("".join(kept), encoding="utf-8", errors="surrogateescape")
            shutil.copymode(self.path, temporary)
            os.replace(temporary, self.path)
        finally:
            temporary.unlink(missing_ok=True)
        log.debug("Dropped %d known_hosts entries for %s", dropped, hostname)
        return dropped


if TYPE_CHECKING:
    from sshm.domain.ports import EvidenceFetcher, KnownHostsPurger

    _fetcher_check: EvidenceFetcher = LocalEvidenceFetcher(Path(), Path())
    _purger_check: KnownHostsPurger = KnownHostsFile(Path())
