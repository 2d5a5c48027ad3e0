"""
Integration tests against a real MySQL server.

Uses MYSQL_HOST, MYSQL_PORT, MYSQL_DATABASE, MYSQL_USER, MYSQL_PASSWORD from env;
skipped when MYSQL_HOST is not set.
"""

import os
import uuid

import pytest

from sqlbridge import DatabaseManager, ServerConnector

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(not os.environ.get("MYSQL_HOST"), reason="MYSQL_HOST not set"),
]


@pytest.fixture
def manager():
    connector = ServerConnector.make_with_auth(
        os.environ.get("MYSQL_HOST", "localhost"),
        os.environ.get("MYSQL_DATABASE", "app"),
        os.environ.get("MYSQL_USER", "app"),
        os.environ.get("MYSQL_PASSWORD", "app"),
        port=int(os.environ.get("MYSQL_PORT", "3306")),
    )
    table = f"itest_{uuid.uuid4().hex[:8]}"
    mgr = DatabaseManager(connector)
    mgr.send_non_query(f"CREATE TABLE {table} (id INT PRIMARY KEY, name VARCHAR(50), score INT)")
    mgr.table = table  # type: ignore[attr-defined]
    try:
        yield mgr
    finally:
        mgr.send_non_query(f"DROP TABLE IF EXISTS {table}")
        connector.close()


def test_insert_then_select_round_trip(manager) -> None:
    t = manager.table
    assert manager.insert(t, ["id", "name", "score"], [[1, "ann", 90]]) == 1

    rows = manager.select_all_with_condition(t, "id = 1")

    assert rows == [{"id": "1", "name": "ann", "score": "90"}]


def test_insert_whole_and_update_and_delete(manager) -> None:
    t = manager.table
    manager.insert_whole(t, [1, "ann", 10])
    manager.insert_whole(t, [2, "bob", 20])

    assert manager.update(t, {"score": "score + 1"}, "id = 2") == 1
    assert manager.select_with_condition(["score"], t, "id = 2") == [{"score": "21"}]
    assert manager.delete_from(t, "id > 0") == 2
    assert manager.select_all_without_condition(t) == []


def test_values_are_escaped(manager) -> None:
    t = manager.table
    manager.insert(t, ["id", "name"], [[1, "x'); DROP TABLE users; --"]])
    assert manager.select_with_condition(["name"], t, "id = 1") == [
        {"name": "x'); DROP TABLE users; --"}
    ]


def test_invalid_sql_returns_empty(manager) -> None:
    assert manager.send_query("SELEKT nothing") == []
    assert manager.last_error is not None
    assert manager.send_non_query(f"UPDATE {manager.table} SET score = 0 WHERE 1 = 0") == 0


def test_keep_alive_and_is_alive(manager) -> None:
    connector = manager.get_connector()
    connector.keep_alive()
    assert connector.is_alive() is True


def test_run_script(manager, tmp_path) -> None:
    t = manager.table
    script = tmp_path / "seed.sql"
    script.write_text(
        f"INSERT INTO {t} VALUES (1, 'a;b', 1);\n-- comment\nINSERT INTO {t} VALUES (2, 'c', 2);\n",
        encoding="utf-8",
    )
    assert manager.run_mysql_script(script) == 2
    assert len(manager.select_all_without_condition(t)) == 2
