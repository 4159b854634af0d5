# app/utils/logger.py
"""
Logging setup shared by the API, the ledgers and the setup scripts.

Console output always; a rotating file under logs/ unless LOG_FILE is empty.
Ledger modules log INFO for committed writes, WARNING for alerts and retries.
"""

import logging
import os
from logging.handlers import RotatingFileHandler

from app.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "logs")

# Third-party loggers that drown out ledger messages at INFO
QUIET_LOGGERS = ("uvicorn.access", "httpx", "urllib3")

_configured = False


def _file_handler(level: str, fmt: logging.Formatter) -> RotatingFileHandler:
    os.makedirs(LOG_DIR, exist_ok=True)
    handler = RotatingFileHandler(
        filename=os.path.join(LOG_DIR, settings.LOG_FILE),
        maxBytes=5 * 1024 * 1024,   # 10 files × 5MB
        backupCount=10,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(fmt)
    return handler


def configure_logging():
    global _configured
    if _configured:
        return
    _configured = True

    level = settings.LOG_LEVEL.upper()
    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(fmt)

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(console)
    if settings.LOG_FILE:
        root.addHandler(_file_handler(level, fmt))

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    if settings.DATABASE_ECHO:
        # SQL goes through our handlers instead of SQLAlchemy's own stdout handler
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)


def get_logger(name: str) -> logging.Logger:
    """Named logger; configures the root logger on first use."""
    configure_logging()
    return logging.getLogger(name)
