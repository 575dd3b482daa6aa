"""Reusable builders and fakes for host directory tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

from sshm.domain.discovery import DiscoverySettings
from sshm.domain.model import HostProfile
from sshm.domain.ports import Evidence

FALLBACK_USERNAME = "localuser"

DEFAULT_SETTINGS = DiscoverySettings(
    fallback_username=FALLBACK_USERNAME,
    preferred_key_type="ssh-ed25519",
    discovery_tag="ssh-detected",
)


def make_host(
    name: str = "web",
    *,
    hostname: str | None = None,
    username: str = "deploy",
    port: int = 22,
    **fields: object,
) -> HostProfile:
    return HostProfile(
        name=name,
        hostname=hostname or f"{name}.example.com",
        username=username,
        port=port,
        **fields,  # type: ignore[arg-type]
    )


@dataclass(slots=True)
class FakeEvidence:
    """Evidence fetcher returning canned file contents."""

    known_hosts: list[str] = field(default_factory=list)
    ssh_config: list[str] = field(default_factory=list)
    histories: list[list[str]] = field(default_factory=list)
    calls: int = 0

    def __call__(self) -> Evidence:
        self.calls += 1
        return Evidence(
            known_hosts=tuple(self.known_hosts),
            ssh_config=tuple(self.ssh_config),
            shell_histories=tuple(tuple(lines) for lines in self.histories),
        )


@dataclass(slots=True)
class FakeLookup:
    """Name lookup answering from a fixed table and recording queries."""

    answers: dict[str, list[str]] = field(default_factory=dict)
    queries: list[str] = field(default_factory=list)

    def __call__(self, hostname: str) -> list[str]:
        self.queries.append(hostname)
        if hostname not in self.answers:
            raise OSError(f"unknown host {hostname}")
        return self.answers[hostname]


@dataclass(slots=True)
class RecordingPurger:
    calls: list[tuple[str, int]] = field(default_factory=list)
    error: Exception | None = None

    def __call__(self, hostname: str, port: int) -> int:
        self.calls.append((hostname, port))
        if self.error is not None:
            raise self.error
        return 1


@dataclass(slots=True)
class StepClock:
    """Clock advancing one minute per call."""

    current: datetime = field(default_factory=lambda: datetime(2026, 1, 1, tzinfo=UTC))

    def __call__(self) -> datetime:
        self.current += timedelta(minutes=1)
        return self.current
