"""Logfire setup.

Repositories open one span per write (``insert user``, ``delete vote``...)
and log a warning for every failed statement; the engine itself is traced
through logfire's SQLAlchemy integration.
"""

import logfire
from sqlalchemy import Engine

from forum.config import Settings

SERVICE_NAME = "forum"


def configure_logfire(settings: Settings) -> None:
    """Configure logfire from the observability settings.

    Telemetry leaves the process only when ``sends_to_logfire`` is true,
    which by default means a token is configured.

    Args:
        settings: Forum settings
    """
    observability = settings.observability
    console = (
        logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        )
        if observability.console
        else False
    )

    logfire.configure(
        service_name=SERVICE_NAME,
        environment=settings.environment,
        send_to_logfire=observability.sends_to_logfire,
        token=observability.logfire_token,
        console=console,
    )
    logfire.info(
        "Logfire configured",
        environment=settings.environment,
        send_to_logfire=observability.sends_to_logfire,
    )


def instrument_sqlalchemy(engine: Engine) -> None:
    """Trace every statement the engine runs."""
    logfire.instrument_sqlalchemy(engine=engine)
