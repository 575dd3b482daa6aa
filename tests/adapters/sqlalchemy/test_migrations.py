from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import create_engine, inspect

from sshm.adapters.sqlalchemy.migrations import upgrade_head

if TYPE_CHECKING:
    from pathlib import Path

    from sqlalchemy.engine import Engine


def test_upgrade_head_creates_host_table(sqlite_engine: Engine) -> None:
    inspector = inspect(sqlite_engine)

    assert "host" in inspector.get_table_names()
    columns = {column["name"] for column in inspector.get_columns("host")}
    assert {"id", "name", "hostname", "ip_address", "use_count", "last_used"} <= columns
    unique = inspector.get_unique_constraints("host")
    assert [constraint["column_names"] for constraint in unique] == [["name"]]


def test_upgrade_head_is_idempotent_for_file_databases(tmp_path: Path) -> None:
    uri = f"sqlite+pysqlite:///{tmp_path / 'hosts.db'}"

    upgrade_head(database_uri=uri)
    upgrade_head(database_uri=uri)

    engine = create_engine(uri)
    try:
        assert "host" in inspect(engine).get_table_names()
    finally:
        engine.dispose()
