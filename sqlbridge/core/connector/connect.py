"""
Low-level MySQL helpers: open a connection, run one statement, shape rows.

Uses PyMySQL. Everything above this module talks to the driver only through
these functions or through the raw connection handle.
"""

import logging
from typing import Any

import pymysql

from sqlbridge.models import ConnectionParams, Record

logger = logging.getLogger(__name__)


def _to_params(params: Any) -> ConnectionParams:
    if isinstance(params, ConnectionParams):
        return params
    if isinstance(params, dict):
        return ConnectionParams.model_validate(params)
    raise TypeError(f"Expected ConnectionParams or dict, got {type(params).__name__}")


def connect(params: ConnectionParams | dict[str, Any]) -> pymysql.connections.Connection:
    """
    Open a connection to a MySQL server.

    - params: ConnectionParams or a dict with server, database, user, password
      (and optionally port, charset, connect_timeout, autocommit).

    No validation beyond the model: bad hosts or credentials surface as
    ``pymysql.MySQLError`` from the driver.
    """
    p = _to_params(params)
    logger.info("Connecting to mysql://%s:%s/%s as %r", p.server, p.port, p.database, p.user)
    return pymysql.connect(**p.driver_kwargs())


def execute(
    conn: Any,
    sql: str,
    params: list | tuple | None = None,
) -> Any:
    """
    Execute SQL and return the cursor. Caller uses cursor_to_records(cursor) or cursor.rowcount.

    ``sql`` must already be in driver form (``%s`` placeholders) when params are given.
    """
    logger.debug("execute: %s (%d bound value(s))", sql, len(params) if params is not None else 0)
    cur = conn.cursor()
    try:
        if params is not None:
            cur.execute(sql, params)
        else:
            cur.execute(sql)
    except Exception:
        cur.close()
        raise
    return cur


def cursor_to_dicts(cursor: Any) -> list[dict[str, Any]]:
    """Convert cursor result to list of dicts with driver-typed values."""
    desc = cursor.description
    if not desc:
        return []
    names = [d[0] for d in desc]
    return [dict(zip(names, row, strict=True)) for row in cursor.fetchall()]


def _column_text(value: Any) -> str | None:
    """Text form of a value read back from the driver (str() of it; NULL stays None)."""
    if value is None:
        return None
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)


def cursor_to_records(cursor: Any) -> list[Record]:
    """Like cursor_to_dicts, but every non-NULL value is converted to text."""
    return [
        {name: _column_text(value) for name, value in row.items()}
        for row in cursor_to_dicts(cursor)
    ]
