"""Logging setup for the sshm command line."""

from __future__ import annotations

import logging

from .env import optional_env_var
from .errors import ConfigurationError

LOG_LEVEL_ENV_VAR = "SSHM_LOG_LEVEL"


def log_level_from_env(default: int = logging.WARNING) -> int:
    """Read ``SSHM_LOG_LEVEL`` (a level name such as ``DEBUG``)."""

    value = optional_env_var(LOG_LEVEL_ENV_VAR)
    if value is None:
        return default
    level = logging.getLevelNamesMapping().get(value.upper())
    if level is None:
        raise ConfigurationError(f"{LOG_LEVEL_ENV_VAR} is not a logging level: {value!r}")
    return level


def configure_logging(*, level: int | None = None, force: bool = False) -> None:
    """Initialise the root logger once.

    Without an explicit ``level`` the environment decides, defaulting to
    WARNING so command output stays readable. SQLAlchemy's own loggers are kept
    at WARNING unless DEBUG was asked for.
    """

    effective_level = level if level is not None else log_level_from_env()
    logging.basicConfig(
        level=effective_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
    if effective_level > logging.DEBUG:
        logging.getLogger("sqlalchemy").setLevel(logging.WARNING)
