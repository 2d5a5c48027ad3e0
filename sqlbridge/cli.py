"""
Command-line access to a MySQL server using the MYSQL_* settings.

Usage:
  sqlbridge ping
  sqlbridge query "SELECT * FROM t"
  sqlbridge exec "DELETE FROM t WHERE id = 1"
  sqlbridge script path/to/schema.sql

Connection values come from the environment / .env (MYSQL_SERVER, MYSQL_DB,
MYSQL_USER, MYSQL_PASSWORD, MYSQL_PORT); --database overrides MYSQL_DB.
"""

import argparse
import json
import sys

from sqlbridge.core.config import settings
from sqlbridge.core.connector import ServerConnector
from sqlbridge.core.logging import configure_logging
from sqlbridge.engines.manager import DatabaseManager


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sqlbridge",
        description="Run statements against the configured MySQL server.",
    )
    parser.add_argument(
        "--database",
        default=None,
        help="Database to use (default: MYSQL_DB)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: LOG_LEVEL)",
    )
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("ping", help="Exit 0 if the server answers SELECT 1")
    q = sub.add_parser("query", help="Run a SELECT and print rows as JSON lines")
    q.add_argument("sql")
    e = sub.add_parser("exec", help="Run a statement and print the affected row count")
    e.add_argument("sql")
    s = sub.add_parser("script", help="Run every statement in a SQL file")
    s.add_argument("path")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    configure_logging(args.log_level)

    cfg = settings
    if args.database is not None:
        cfg = settings.model_copy(update={"MYSQL_DB": args.database})

    with ServerConnector.from_settings(cfg) as connector:
        if args.command == "ping":
            ok = connector.is_alive()
            print("ok" if ok else "unreachable")
            return 0 if ok else 1

        manager = DatabaseManager(connector)
        if args.command == "query":
            for record in manager.send_query(args.sql):
                print(json.dumps(record, ensure_ascii=False))
        elif args.command == "exec":
            print(manager.send_non_query(args.sql))
        else:
            print(manager.run_mysql_script(args.path))

        if manager.last_error is not None:
            print(f"Error: {manager.last_error}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
