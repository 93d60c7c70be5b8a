import logging
import sys
from logging import StreamHandler

from src.config.settings import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Chatty at DEBUG and not about invitations
QUIET_LOGGERS = ("httpx", "httpcore", "aiosqlite", "asyncio")


def setup_logging() -> None:
    level = logging.DEBUG if settings.debug else logging.INFO
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[StreamHandler(sys.stdout)],
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
    # Statement echo stays under LOG_DB
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.LOG_DB else logging.WARNING
    )
