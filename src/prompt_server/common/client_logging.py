"""Logging handler for MCP clients.

Forwards server log notifications into Python's logging system.
"""

import logging

from fastmcp.client.logging import LogMessage

from prompt_server.common.logging import get_logger


# Get module logger
logger = get_logger(__name__)

# Logging level mapping from MCP to Python
LOGGING_LEVEL_MAP = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "notice": logging.INFO,  # MCP notice -> Python INFO
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
    "alert": logging.CRITICAL,  # MCP alert -> Python CRITICAL
    "emergency": logging.CRITICAL,  # MCP emergency -> Python CRITICAL
}


async def default_log_handler(message: LogMessage) -> None:
    """Default log handler for MCP clients.

    Servers send either a plain string or a ``{"msg": ..., "extra": ...}``
    mapping as the log payload; both are accepted.

    Args:
        message: LogMessage from MCP server containing log data

    Example:
        >>> from fastmcp import Client
        >>> client = Client(server, log_handler=default_log_handler)
    """
    if isinstance(message.data, dict):
        msg = message.data.get('msg', '')
        extra = message.data.get('extra')
    else:
        msg = str(message.data)
        extra = None
    logger_name = message.logger or 'mcp.server'

    level = LOGGING_LEVEL_MAP.get(message.level.lower(), logging.INFO)
    server_logger = logging.getLogger(logger_name)

    if extra:
        server_logger.log(level, f"{msg} | Extra: {extra}")
    else:
        server_logger.log(level, msg)
