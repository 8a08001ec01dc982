# ==============================================
# Pytest Configuration and Fixtures
# ==============================================

import sqlite3

import pytest

from sqlquery.analysis.roles import ColumnRoleConfig
from sqlquery.config import SqlQueryConfig, reset_config
from sqlquery.storage.sink import MemorySink


SCENARIO_COLUMNS = ["loc", "used", "ratio", "active", "note"]


@pytest.fixture
def scenario_roles() -> ColumnRoleConfig:
    """Roles for the loc/used/ratio/active/note example."""
    return ColumnRoleConfig.from_lists(
        tag_cols=["loc"],
        int_fields=["used"],
        float_fields=["ratio"],
        bool_fields=["active"],
    )


@pytest.fixture
def sqlite_db(tmp_path) -> str:
    """A file-backed sqlite database with a small `racks` table."""
    path = str(tmp_path / "metrics.db")
    conn = sqlite3.connect(path)
    conn.execute("CREATE TABLE racks (loc TEXT, used TEXT, ratio TEXT, active TEXT, note TEXT)")
    conn.executemany(
        "INSERT INTO racks VALUES (?, ?, ?, ?, ?)",
        [
            ("rack1", "42", "3.5", "true", None),
            ("rack2", "7", "0.25", "0", "spare"),
            (None, None, None, None, None),
        ]
    )
    conn.commit()
    conn.close()
    return path


@pytest.fixture
def sqlite_config(sqlite_db) -> SqlQueryConfig:
    return SqlQueryConfig(
        driver="sqlite",
        server_url=sqlite_db,
        queries=["SELECT loc, used, ratio, active, note FROM racks ORDER BY rowid"],
        table_name="racks",
        tag_cols=["loc"],
        int_fields=["used"],
        float_fields=["ratio"],
        bool_fields=["active"],
    )


@pytest.fixture
def memory_sink() -> MemorySink:
    return MemorySink()


@pytest.fixture(autouse=True)
def fresh_config():
    """Each test starts without a cached AppConfig."""
    reset_config()
    yield
    reset_config()
