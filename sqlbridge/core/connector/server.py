"""
ServerConnector: owns exactly one live MySQL connection.

The connection is opened in the constructor; there is no lazy connect and no
pooling. A connector is not thread-safe: the handle is one mutable session
(selected schema, pending results), so callers must serialise access to it
or use one connector per thread.
"""

import logging
from typing import Any

import pymysql

from sqlbridge.core.config import Settings, settings as default_settings
from sqlbridge.models import ConnectionParams

from .connect import connect
from .health import health_check

logger = logging.getLogger(__name__)


class ServerConnector:
    """Connection factory and holder for a single MySQL session."""

    def __init__(
        self,
        server: str,
        database: str,
        user: str = "",
        password: str = "",
        **options: Any,
    ) -> None:
        params = ConnectionParams(
            server=server,
            database=database,
            user=user,
            password=password,
            **options,
        )
        # Credentials are only needed here; only the handle is kept.
        self._connection: pymysql.connections.Connection = connect(params)

    @classmethod
    def make_no_auth(cls, server: str, database: str, **options: Any) -> "ServerConnector":
        """Connect without credentials (anonymous or trust-based auth)."""
        return cls(server, database, "", "", **options)

    @classmethod
    def make_with_auth(
        cls,
        server: str,
        database: str,
        user: str,
        password: str,
        **options: Any,
    ) -> "ServerConnector":
        return cls(server, database, user, password, **options)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "ServerConnector":
        """Connect using the MYSQL_* / DB_* configuration values."""
        s = settings or default_settings
        return cls(
            s.MYSQL_SERVER,
            s.MYSQL_DB,
            s.MYSQL_USER,
            s.MYSQL_PASSWORD,
            port=s.MYSQL_PORT,
            charset=s.DB_CHARSET,
            connect_timeout=s.DB_CONNECT_TIMEOUT,
            autocommit=s.DB_AUTOCOMMIT,
        )

    def get_connection(self) -> pymysql.connections.Connection:
        """Return the raw driver handle for anything this class does not wrap."""
        return self._connection

    def close(self) -> None:
        """Close the connection. Using the handle afterwards is undefined."""
        logger.info("Closing connection")
        self._connection.close()

    def keep_alive(self) -> None:
        """
        Ping the server on the existing handle.

        Never opens a new connection: if the session is gone the driver error
        propagates to the caller.
        """
        self._connection.ping(reconnect=False)

    def reconnect(self) -> None:
        """Alias of keep_alive(). Despite the name, this does not reconnect."""
        self.keep_alive()

    def is_alive(self) -> bool:
        """True if SELECT 1 succeeds on the handle. Never raises."""
        return health_check(self._connection)

    def __enter__(self) -> "ServerConnector":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
