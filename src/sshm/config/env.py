"""Environment variable loaders for configuration."""

from __future__ import annotations

import os
from pathlib import Path

from .errors import ConfigurationError


def optional_env_var(name: str) -> str | None:
    """Return the variable's value, treating unset and blank the same."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def env_float(name: str, default: float) -> float:
    value = optional_env_var(name)
    if value is None:
        return default
    try:
        parsed = float(value)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number, got {value!r}") from exc
    if parsed <= 0:
        raise ConfigurationError(f"{name} must be positive, got {value!r}")
    return parsed


def env_paths(name: str) -> tuple[Path, ...] | None:
    """Split an ``os.pathsep`` separated list of paths."""

    value = optional_env_var(name)
    if value is None:
        return None
    return tuple(Path(part).expanduser() for part in value.split(os.pathsep) if part.strip())
