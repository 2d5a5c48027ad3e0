"""
Runtime settings for sqlbridge.

Values come from the environment (or a local ``.env`` file). Only the
connection defaults used by ``ServerConnector.from_settings`` and the CLI
live here; the library itself never reads the environment behind the
caller's back.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    MYSQL_SERVER: str = "localhost"
    MYSQL_PORT: int = 3306
    MYSQL_DB: str = ""
    MYSQL_USER: str = ""
    MYSQL_PASSWORD: str = ""

    # Seconds; passed to the driver, not enforced per statement.
    DB_CONNECT_TIMEOUT: int = 10
    DB_CHARSET: str = "utf8mb4"
    DB_AUTOCOMMIT: bool = True

    SCRIPT_ENCODING: str = "utf-8"
    LOG_LEVEL: str = "INFO"


settings = Settings()  # type: ignore
