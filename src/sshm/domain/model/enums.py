"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class EvidenceSource(StrEnum):
    KNOWN_HOSTS = "known_hosts"
    SSH_CONFIG = "ssh_config"
    SHELL_HISTORY = "shell_history"
