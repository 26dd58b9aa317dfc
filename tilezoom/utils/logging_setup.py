# tilezoom/utils/logging_setup.py
import logging

import colorama

LOGGER_NAME = "tilezoom"  # Package-level logger name
DEFAULT_FORMAT = "%(asctime)s - %(levelname)s - %(message)s (%(filename)s:%(lineno)d)"

# Guards against attaching the stream handler more than once
_logger_initialized = False

LOG_COLORS = {
    "DEBUG": colorama.Fore.BLUE,
    "INFO": colorama.Fore.GREEN,
    "WARNING": colorama.Fore.YELLOW,
    "ERROR": colorama.Fore.RED,
    "CRITICAL": colorama.Fore.RED + colorama.Style.BRIGHT,
}


class ColoredFormatter(logging.Formatter):
    """Colors the level name only, leaving the record untouched for other handlers."""

    def format(self, record):
        original_levelname = record.levelname
        color = LOG_COLORS.get(original_levelname, "")
        record.levelname = f"{color}{original_levelname}{colorama.Style.RESET_ALL}"
        try:
            return super().format(record)
        finally:
            record.levelname = original_levelname


def init_logger(level=logging.INFO, log_format=DEFAULT_FORMAT):
    global _logger_initialized
    logger = logging.getLogger(LOGGER_NAME)
    if _logger_initialized:
        logger.setLevel(level)
        return logger

    colorama.init(autoreset=True)
    logger.setLevel(level)

    if not logger.handlers:
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(ColoredFormatter(log_format))
        logger.addHandler(stream_handler)

    _logger_initialized = True
    return logger


def get_logger(name=LOGGER_NAME):
    """
    Retrieves a logger under the package namespace. Initializes the package
    logger if that has not happened yet.
    """
    if not _logger_initialized:
        init_logger()
    return logging.getLogger(name)


if not _logger_initialized:
    init_logger()
