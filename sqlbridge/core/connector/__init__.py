"""
MySQL connection handling: driver helpers and the single-connection ServerConnector.
"""

from .connect import connect, cursor_to_dicts, cursor_to_records, execute
from .health import health_check
from .server import ServerConnector

__all__ = [
    "connect",
    "execute",
    "cursor_to_dicts",
    "cursor_to_records",
    "health_check",
    "ServerConnector",
]
