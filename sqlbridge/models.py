"""
Connection parameters and result shapes shared by the connector and the manager.
"""

from typing import Any

from pydantic import BaseModel, Field

from sqlbridge.core.config import settings

# One result row: column name -> value as text (NULL stays None).
Record = dict[str, str | None]
ResultSet = list[Record]


class ConnectionParams(BaseModel):
    """Everything needed to open one MySQL session.

    ``user`` / ``password`` default to empty strings (anonymous or trust auth).
    """

    server: str
    database: str
    user: str = ""
    password: str = ""
    port: int = Field(default_factory=lambda: settings.MYSQL_PORT)
    charset: str = Field(default_factory=lambda: settings.DB_CHARSET)
    connect_timeout: int = Field(default_factory=lambda: settings.DB_CONNECT_TIMEOUT)
    autocommit: bool = Field(default_factory=lambda: settings.DB_AUTOCOMMIT)

    def driver_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for ``pymysql.connect``."""
        return {
            "host": self.server,
            "port": self.port,
            "database": self.database or None,
            "user": self.user,
            "password": self.password,
            "charset": self.charset,
            "connect_timeout": self.connect_timeout,
            "autocommit": self.autocommit,
        }
