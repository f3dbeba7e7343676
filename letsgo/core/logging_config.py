import os
import sys

from loguru import logger

from letsgo.core.config import LOG_DIR, LOG_LEVEL

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {message}"

# file name -> log_type it collects (None collects everything)
CHANNELS = {
    "app.log": None,
    "bookings.log": "booking",
    "admin.log": "admin",
}


def _only(log_type):
    return lambda record: record["extra"].get("log_type") == log_type


os.makedirs(LOG_DIR, exist_ok=True)

logger.remove()
logger.add(sys.stderr, level=LOG_LEVEL, format=LOG_FORMAT)

for filename, log_type in CHANNELS.items():
    logger.add(
        os.path.join(LOG_DIR, filename),
        rotation="1 week",
        retention="4 weeks",
        level="INFO",
        enqueue=True,
        filter=_only(log_type) if log_type else None,
        format=LOG_FORMAT,
    )

# Failures keep the traceback and are retained longer
logger.add(
    os.path.join(LOG_DIR, "errors.log"),
    rotation="1 week",
    retention="8 weeks",
    level="ERROR",
    enqueue=True,
    backtrace=True,
)


def get_logger():
    return logger
