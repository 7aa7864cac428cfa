"""
Logging configuration for the template registry.
"""
from typing import Optional

import structlog

from .config import LogFormat, Settings, get_settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure structlog according to settings"""
    settings = settings or get_settings()

    if settings.log_format == LogFormat.JSON:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(settings.log_level_value),
    )
