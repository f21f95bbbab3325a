import logging

from bugscope import config

default_level = config.LOGGING_LEVEL
VALID_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

logging.basicConfig(
    level=getattr(logging, default_level or "INFO", logging.INFO),
    format="%(asctime)s [%(levelname)s] [%(filename)s:%(lineno)d - %(funcName)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

logger = logging.getLogger("bugscope")

# Shortcut aliases
debug = logger.debug
info = logger.info
warning = logger.warning
error = logger.error
exception = logger.exception


def get_logger():
    return logger


def set_logging_level(level: str):
    normalized_level = level.upper()
    if normalized_level not in VALID_LEVELS:
        logger.warning(f"Invalid logging level: {level}. Level not changed.")
        return
    logger.setLevel(getattr(logging, normalized_level))
    logger.info(f"Logging level changed to: {normalized_level}")
