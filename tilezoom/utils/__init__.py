from .logging_setup import get_logger, init_logger

__all__ = [
    "get_logger",
    "init_logger",  # If users need to re-init with a different level
]
