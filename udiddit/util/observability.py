"""Observability configuration using Logfire.

Services open a span per operation and emit structured events:

    with logfire.span("normalizer.write_posts"):
        ...
        logfire.info("Posts written", created=created, rejected=rejected)

Rejected legacy records are ``logfire.warn`` events; fatal migration errors
are ``logfire.error``.
"""

import logfire
from sqlalchemy.ext.asyncio import AsyncEngine

from udiddit.config import ObservabilitySettings, Settings


def should_send_to_logfire(observability: ObservabilitySettings) -> bool:
    """An explicit flag wins; otherwise send only when a token is set."""
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for a script run.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    send_to_logfire = should_send_to_logfire(observability)

    logfire.configure(
        service_name="udiddit-migration",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        has_token=bool(observability.logfire_token),
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every SQL statement, savepoints included.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
    logfire.info("SQLAlchemy instrumented")
