"""Stored connection profiles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from sshm.domain.errors import ValidationError
from sshm.domain.model.primitives import DEFAULT_SSH_PORT, normalize_port, parse_tags

if TYPE_CHECKING:
    from datetime import datetime


@dataclass(kw_only=True)
class HostProfile:
    """A user-visible connection record.

    ``id`` is assigned by the store and may change when a profile with a
    smaller id is deleted. ``last_used`` is ``None`` for never-used profiles.
    """

    name: str
    hostname: str
    username: str
    port: int = DEFAULT_SSH_PORT
    id: int | None = None
    ip_address: str | None = None
    key_path: str | None = None
    description: str | None = None
    tags: str | None = None
    last_used: datetime | None = None
    use_count: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def tag_list(self) -> list[str]:
        return parse_tags(self.tags)

    @property
    def has_been_used(self) -> bool:
        return self.last_used is not None

    @property
    def connection_string(self) -> str:
        return f"{self.username}@{self.hostname}"

    def ssh_args(self) -> list[str]:
        """Arguments for the system ``ssh`` client (without the program name)."""

        args: list[str] = []
        if self.port != DEFAULT_SSH_PORT:
            args.extend(["-p", str(self.port)])
        if self.key_path:
            args.extend(["-i", self.key_path])
        args.append(self.connection_string)
        return args

    def ssh_command(self) -> str:
        return " ".join(["ssh", *self.ssh_args()])


def validate_profile(profile: HostProfile) -> HostProfile:
    """Check required fields and normalize the port in place."""

    missing = [
        field_name
        for field_name in ("name", "hostname", "username")
        if not (getattr(profile, field_name) or "").strip()
    ]
    if missing:
        raise ValidationError(f"Missing required host fields: {', '.join(missing)}")
    profile.port = normalize_port(profile.port)
    return profile
