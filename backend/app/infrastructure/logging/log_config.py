"""Per-category log levels, applied once at startup.

Each category in Settings (``log_level_sql``, ``log_level_services`` ...)
owns a handful of logger names, so noisy SQL echo can be muted while the
unit-of-work lifecycle stays visible.
"""

import logging
import sys

from app.config import Settings, get_settings

_LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

CATEGORY_LOGGERS: dict[str, tuple[str, ...]] = {
    "log_level_sql": ("sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite"),
    "log_level_uvicorn": ("uvicorn", "uvicorn.access", "uvicorn.error"),
    "log_level_services": ("app.application.services",),
    "log_level_transactions": ("UnitOfWork",),
}


def setup_logging(settings: Settings | None = None) -> None:
    """Set the root level, install a stderr handler if none exists, apply categories."""
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(settings.log_level)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        root.addHandler(handler)

    for field_name, logger_names in CATEGORY_LOGGERS.items():
        level = getattr(settings, field_name)
        for name in logger_names:
            logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).debug(
        "Log levels: root=%s %s",
        settings.log_level,
        " ".join(f"{field}={getattr(settings, field)}" for field in CATEGORY_LOGGERS),
    )
