"""
Frontdesk - reservation store bootstrap
"""

import logging
import sys
from typing import Optional

import structlog

from frontdesk.clock import Clock, system_clock
from frontdesk.config import Settings, get_settings
from frontdesk.database import get_engine, init_db
from frontdesk.storage import get_storage
from frontdesk.store import PersistErrorHandler, ReservationStore

logger = structlog.get_logger()


def configure_logging(settings: Settings) -> None:
    """Configure structured logging"""
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=settings.log_level.upper(),
    )

    if settings.log_format == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def create_store(
    settings: Optional[Settings] = None,
    clock: Optional[Clock] = None,
    on_persist_error: Optional[PersistErrorHandler] = None,
) -> ReservationStore:
    """
    Build the reservation store for the front-desk session.
    The caller owns the returned store and hands it to whatever needs it.
    Logging is left alone; entry points call configure_logging() once.
    """
    settings = settings or get_settings()

    engine = None
    if not settings.uses_memory_storage:
        engine = get_engine(settings.storage_url)
        init_db(engine)

    store = ReservationStore(
        storage=get_storage(settings, engine),
        slot=settings.storage_slot,
        clock=clock or system_clock(settings.timezone),
        late_grace_minutes=settings.late_grace_minutes,
        on_persist_error=on_persist_error,
    )

    logger.info(
        "Reservation store ready",
        restaurant=settings.restaurant_name,
        storage=settings.storage_url,
        slot=settings.storage_slot,
    )
    return store
