import logging

from sqlbridge.core.config import settings

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Apply LOG_LEVEL (or *level*) to the root logger. Used by the CLI only."""
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format=_FORMAT,
    )
    # PyMySQL is chatty at DEBUG; keep it at WARNING unless asked otherwise.
    logging.getLogger("pymysql").setLevel(logging.WARNING)
