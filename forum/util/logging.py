"""Standard library logging for the forum package and SQLAlchemy."""

import logging
import sys

from forum.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def log_level(settings: Settings) -> int:
    """Pick the root log level: debug flag first, then environment."""
    if settings.debug:
        return logging.DEBUG
    if settings.environment in ("staging", "production"):
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Route log records to stdout at the level the settings call for.

    SQLAlchemy's engine logger is raised to INFO only when
    ``DATABASE__ECHO`` is set, so statements are not logged twice when
    logfire instrumentation is on.

    Args:
        settings: Forum settings
    """
    level = log_level(settings)
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    sql_level = logging.INFO if settings.database.echo else logging.WARNING
    logging.getLogger("sqlalchemy.engine").setLevel(sql_level)
    logging.getLogger("forum").setLevel(level)

    logging.getLogger(__name__).info(
        "Logging ready (environment=%s, level=%s)",
        settings.environment,
        logging.getLevelName(level),
    )
