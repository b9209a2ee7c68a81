# utils/logger.py
import logging
import sys
from config.paths import LOG_PATH
from utils.constants import LOG_LEVEL, CONSOLE_LOG_LEVEL

# Ensure directory exists
LOG_PATH.parent.mkdir(parents=True, exist_ok=True)

logger = logging.getLogger("nursesched")
logger.setLevel(LOG_LEVEL)

# Prevent duplicate handlers if imported multiple times
if not logger.handlers:
    # File handler
    file_handler = logging.FileHandler(LOG_PATH, encoding="utf-8")
    file_formatter = logging.Formatter(
        "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    file_handler.setFormatter(file_formatter)

    # Stream handler (stderr, so log lines never mix with command output)
    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setLevel(CONSOLE_LOG_LEVEL)
    stream_formatter = logging.Formatter("[%(levelname)s] %(message)s")
    stream_handler.setFormatter(stream_formatter)

    # Add both handlers
    logger.addHandler(file_handler)
    logger.addHandler(stream_handler)


def get_logger(name: str) -> logging.Logger:
    """Child of the application logger, so it shares its handlers."""
    return logger.getChild(name)
