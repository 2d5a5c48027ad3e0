"""
sqlbridge: a small MySQL data-access layer.

ServerConnector owns one PyMySQL connection; DatabaseManager builds CRUD
statements and runs them on it, returning rows as plain dicts of text.
"""

from sqlbridge.core.connector import ServerConnector
from sqlbridge.core.exceptions import ArgumentCountError
from sqlbridge.engines.manager import DatabaseManager
from sqlbridge.engines.sql import BoundStatement
from sqlbridge.models import ConnectionParams, Record, ResultSet

__all__ = [
    "ServerConnector",
    "DatabaseManager",
    "BoundStatement",
    "ConnectionParams",
    "Record",
    "ResultSet",
    "ArgumentCountError",
]
