"""Location of the host database."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .env import optional_env_var

APP_DIR_NAME: Final[str] = ".sshm"
DEFAULT_DB_FILENAME: Final[str] = "hosts.db"


@dataclass(frozen=True, slots=True)
class StorageConfig:
    """Directory holding sshm's own state (``~/.sshm`` unless overridden)."""

    data_dir: Path
    database_filename: str = DEFAULT_DB_FILENAME

    def database_path(self, *, ensure: bool = True) -> Path:
        data_dir = self.data_dir.expanduser().resolve()
        if ensure:
            data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir / self.database_filename

    def database_uri(self) -> str:
        return f"sqlite+pysqlite:///{self.database_path()}"


@dataclass(frozen=True, slots=True)
class DatabaseConfig:
    uri: str


def get_storage_config(*, home: Path | None = None) -> StorageConfig:
    env_dir = optional_env_var("SSHM_DATA_DIR")
    if env_dir:
        return StorageConfig(data_dir=Path(env_dir))
    return StorageConfig(data_dir=(home or Path.home()) / APP_DIR_NAME)


def get_database_config(*, storage: StorageConfig | None = None) -> DatabaseConfig:
    """``DATABASE_URI`` wins; otherwise a SQLite file in the data directory."""

    env_uri = optional_env_var("DATABASE_URI")
    if env_uri:
        return DatabaseConfig(uri=env_uri)
    storage_config = storage or get_storage_config()
    return DatabaseConfig(uri=storage_config.database_uri())
