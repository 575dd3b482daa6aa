"""SQLAlchemy adapter package for sshm."""

from __future__ import annotations

from .mappings import UTCDateTime, host_table, metadata
from .repositories import SqlAlchemyHostRepository
from .unit_of_work import (
    SqlAlchemyHostUnitOfWork,
    StartupError,
    configured_engine,
    is_started,
    shutdown,
    startup,
)

__all__ = [
    "SqlAlchemyHostRepository",
    "SqlAlchemyHostUnitOfWork",
    "StartupError",
    "UTCDateTime",
    "configured_engine",
    "host_table",
    "is_started",
    "metadata",
    "shutdown",
    "startup",
]
