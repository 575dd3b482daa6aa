"""Discovery configuration values."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .env import env_float, env_paths, optional_env_var

PREFERRED_KEY_TYPE: Final[str] = "ssh-ed25519"
DISCOVERY_TAG: Final[str] = "ssh-detected"
DEFAULT_RESOLVE_TIMEOUT_SECONDS: Final[float] = 2.0
GENERIC_USERNAME: Final[str] = "user"
HISTORY_FILENAMES: Final[tuple[str, ...]] = (".zsh_history", ".bash_history", ".history")


@dataclass(frozen=True, slots=True)
class DiscoveryConfig:
    ssh_dir: Path
    history_files: tuple[Path, ...]
    fallback_username: str
    preferred_key_type: str = PREFERRED_KEY_TYPE
    discovery_tag: str = DISCOVERY_TAG
    resolve_timeout_seconds: float = DEFAULT_RESOLVE_TIMEOUT_SECONDS

    @property
    def known_hosts_path(self) -> Path:
        return self.ssh_dir / "known_hosts"

    @property
    def ssh_config_path(self) -> Path:
        return self.ssh_dir / "config"


def current_username() -> str:
    """Username of the invoking user, or a generic placeholder."""

    for name in ("USER", "USERNAME"):
        value = os.getenv(name)
        if value:
            return value
    return GENERIC_USERNAME


def get_discovery_config(*, home: Path | None = None) -> DiscoveryConfig:
    home_dir = home or Path.home()
    ssh_dir_override = optional_env_var("SSHM_SSH_DIR")
    ssh_dir = Path(ssh_dir_override).expanduser() if ssh_dir_override else home_dir / ".ssh"
    history_files = env_paths("SSHM_HISTORY_FILES") or tuple(
        home_dir / filename for filename in HISTORY_FILENAMES
    )
    return DiscoveryConfig(
        ssh_dir=ssh_dir,
        history_files=history_files,
        fallback_username=current_username(),
        resolve_timeout_seconds=env_float(
            "SSHM_RESOLVE_TIMEOUT", DEFAULT_RESOLVE_TIMEOUT_SECONDS
        ),
    )
