"""Domain primitives: scalar aliases and small helpers for host fields."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Iterable

type HostId = int
type Port = int

DEFAULT_SSH_PORT: Final[int] = 22
MIN_PORT: Final[int] = 1
MAX_PORT: Final[int] = 65535


def normalize_port(port: int | None) -> int:
    """Return ``port`` when it is a valid TCP port, otherwise the SSH default."""

    if port is None or not MIN_PORT <= port <= MAX_PORT:
        return DEFAULT_SSH_PORT
    return port


def parse_tags(tags: str | None) -> list[str]:
    """Split a comma-delimited tag string, dropping blanks."""

    if not tags:
        return []
    return [tag.strip() for tag in tags.split(",") if tag.strip()]


def join_tags(tags: Iterable[str]) -> str:
    return ", ".join(tag.strip() for tag in tags if tag.strip())
