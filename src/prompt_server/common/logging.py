"""Centralized logging utilities for the prompt servers and the demo client.

Records go to stderr (the ``logging.basicConfig`` default) because stdout
carries the stdio transport.
"""

import logging
from typing import Any

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Configure the root logger for the application
logging.basicConfig(
    level=logging.INFO,
    format=DEFAULT_FORMAT,
    datefmt='%Y-%m-%d %H:%M:%S'
)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the specified name.

    Args:
        name: Logger name, typically __name__ from the calling module

    Returns:
        Configured Logger instance

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Server started")
    """
    return logging.getLogger(name)


def parse_log_level(value: str | int | None, default: int = logging.INFO) -> int:
    """Translate a level name such as ``"debug"`` into a logging level.

    Unknown names fall back to ``default``.
    """
    if value is None:
        return default
    if isinstance(value, int):
        return value
    level = logging.getLevelName(value.strip().upper())
    return level if isinstance(level, int) else default


def setup_logging(level: int = logging.INFO, format_string: str | None = None) -> None:
    """Configure global logging settings.

    Call this at application startup to customize logging behavior.

    Args:
        level: Logging level (e.g., logging.DEBUG, logging.INFO)
        format_string: Custom format string for log messages

    Example:
        >>> setup_logging(level=logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format_string or DEFAULT_FORMAT,
        datefmt='%Y-%m-%d %H:%M:%S',
        force=True  # Override existing configuration
    )


def log_startup(logger: logging.Logger, server_name: str, transport: str, **kwargs: Any) -> None:
    """Log server startup information in a consistent format.

    Args:
        logger: Logger instance
        server_name: Name of the server
        transport: Transport the server is attached to (stdio, http, sse)
        **kwargs: Additional server configuration to log

    Example:
        >>> log_startup(logger, "prompt-server", "stdio", variant="icebreaker")
    """
    logger.debug("=====================================================")
    logger.info(f"Starting {server_name}")
    logger.info(f"Transport: {transport}")

    for key, value in kwargs.items():
        # Format key name nicely (e.g., tool_count -> Tool Count)
        formatted_key = key.replace('_', ' ').title()
        logger.info(f"{formatted_key}: {value}")

    logger.debug("=====================================================")


def mask_sensitive_value(value: str, show_chars: int = 30) -> str:
    """Mask sensitive values for safe logging.

    Args:
        value: The sensitive value to mask
        show_chars: Number of characters to show before masking

    Returns:
        Masked value showing only first few characters

    Example:
        >>> mask_sensitive_value("Bearer abcdefghijklmnop", 10)
        'Bearer abc... (len=23)'
    """
    if len(value) <= show_chars:
        return f"{'*' * len(value)} (len={len(value)})"
    return f"{value[:show_chars]}... (len={len(value)})"
