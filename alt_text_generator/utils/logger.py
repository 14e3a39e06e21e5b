"""
Logging Setup

This module builds the named loggers used across the application. Loggers
are created once by the application factory and handed to each service,
so no module reassigns a shared logger at runtime.
"""

import logging

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def create_logger(name: str = 'alt_text_generator', level: str = 'INFO') -> logging.Logger:
    """
    Create (or fetch) a named logger with a console handler.

    Args:
        name: Logger name
        level: Level name such as DEBUG or INFO

    Returns:
        logging.Logger: Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    # Create console handler if it doesn't exist
    if not logger.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(console_handler)

    return logger
