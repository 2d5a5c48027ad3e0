"""
DatabaseManager: turns CRUD intents into SQL text and runs it on a ServerConnector.

Result rows come back as Records (column name -> text or None).

Error contract:
- send_query / send_non_query never raise for server-side failures; they
  return [] / 0, log a warning and keep the error in ``last_error``.
- insert and bind_parameters validate their arguments (ArgumentCountError)
  and let driver errors through.
- run_mysql_script lets file errors through and stops at the first failing
  statement without raising.

Only values passed to insert / bind_parameters are escaped. Table names,
field names, update values and conditions are written into the SQL as-is.
"""

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import pymysql

from sqlbridge.core.config import settings
from sqlbridge.core.connector import ServerConnector, cursor_to_records, execute
from sqlbridge.core.exceptions import ArgumentCountError
from sqlbridge.engines.sql import (
    BoundStatement,
    array_to_query_string,
    bind_parameters,
    build_delete,
    build_insert,
    build_select,
    build_update,
    read_script,
    split_statements,
)
from sqlbridge.models import ResultSet

logger = logging.getLogger(__name__)


class DatabaseManager:
    """SQL-building and execution façade over one ServerConnector (not owned)."""

    def __init__(self, connector: ServerConnector) -> None:
        self._connector = connector
        self.last_error: pymysql.MySQLError | None = None

    def get_connector(self) -> ServerConnector:
        return self._connector

    def get_connection(self) -> Any:
        return self._connector.get_connection()

    def use_database(self, database: str) -> None:
        """Switch the active schema for every later statement on this connection."""
        self.get_connection().select_db(database)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def insert(
        self,
        table: str,
        fields: Sequence[str],
        value_groups: Sequence[Sequence[Any]],
    ) -> int:
        """
        Insert one row per value group and return the total affected rows.

        Every group must hold one value per field. With no fields the column
        list is omitted, so each group fills the table's columns in declared
        order and all groups must have the same length.
        """
        if not value_groups:
            raise ArgumentCountError("insert requires at least one value group")

        width = len(fields) if fields else len(value_groups[0])
        for index, group in enumerate(value_groups):
            if len(group) != width or width == 0:
                raise ArgumentCountError(
                    f"Value group {index} has {len(group)} value(s), expected {width or 'at least 1'}"
                )

        query = build_insert(table, fields, width)
        affected = 0
        for group in value_groups:
            affected += self.bind_parameters(query, group).execute()
        return affected

    def insert_whole(self, table: str, values: Sequence[Any]) -> int:
        """Insert a single full row, positionally, into every column of *table*."""
        return self.insert(table, [], [values])

    def delete_from(self, table: str, condition: str) -> int:
        """DELETE FROM table WHERE condition. The condition is raw SQL."""
        return self.send_non_query(build_delete(table, condition))

    def update(self, table: str, values: Mapping[str, Any], condition: str) -> int:
        """
        UPDATE table SET field=value, ... WHERE condition.

        Values are interpolated as raw SQL text, not bound: quote string
        literals yourself (e.g. ``{"name": "'bob'"}``) and never pass
        untrusted input here.
        """
        return self.send_non_query(build_update(table, values, condition))

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def select_with_condition(self, fields: Sequence[str], table: str, condition: str) -> ResultSet:
        return self.send_query(build_select(table, fields, condition))

    def select_without_condition(self, fields: Sequence[str], table: str) -> ResultSet:
        return self.send_query(build_select(table, fields))

    def select_all_with_condition(self, table: str, condition: str) -> ResultSet:
        return self.send_query(build_select(table, condition=condition))

    def select_all_without_condition(self, table: str) -> ResultSet:
        return self.send_query(build_select(table))

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    def send_query(self, query: str) -> ResultSet:
        """Run a row-returning statement; [] when it fails or matches nothing."""
        self.last_error = None
        try:
            cur = execute(self.get_connection(), query)
        except pymysql.MySQLError as e:
            self._record_failure(query, e)
            return []
        try:
            return cursor_to_records(cur)
        finally:
            cur.close()

    def send_non_query(self, statement: str) -> int:
        """Run a mutating statement; affected row count, 0 when it fails."""
        self.last_error = None
        try:
            cur = execute(self.get_connection(), statement)
        except pymysql.MySQLError as e:
            self._record_failure(statement, e)
            return 0
        try:
            return cur.rowcount if cur.rowcount is not None and cur.rowcount > 0 else 0
        finally:
            cur.close()

    def run_mysql_script(self, path: str | Path) -> int:
        """
        Run every statement of a SQL script file, in order.

        Returns how many statements ran. The batch stops at the first failing
        statement; that failure is logged and kept in ``last_error``.
        """
        self.last_error = None
        commands = read_script(path, encoding=settings.SCRIPT_ENCODING)
        conn = self.get_connection()
        ran = 0
        for statement in split_statements(commands):
            try:
                cur = execute(conn, statement)
            except pymysql.MySQLError as e:
                self._record_failure(statement, e)
                break
            cur.close()
            ran += 1
        logger.debug("Script %s: %d statement(s) executed", path, ran)
        return ran

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def array_to_query_string(items: Sequence[Any]) -> str:
        return array_to_query_string(items)

    def bind_parameters(
        self,
        query: str,
        values: Sequence[Any],
        *,
        typed: bool = False,
    ) -> BoundStatement:
        """Bind *values* to the ``?`` placeholders of *query*; the caller executes it."""
        return bind_parameters(self.get_connection(), query, values, typed=typed)

    def _record_failure(self, sql: str, error: pymysql.MySQLError) -> None:
        self.last_error = error
        logger.warning("Statement failed: %s", sql, exc_info=error)
