"""Common middleware for the prompt servers."""

from typing import Any

from fastmcp.server.dependencies import get_http_headers
from fastmcp.server.middleware import Middleware, MiddlewareContext
from fastmcp.server.middleware.error_handling import ErrorHandlingMiddleware
from fastmcp.server.middleware.logging import StructuredLoggingMiddleware

from prompt_server.common.logging import get_logger, mask_sensitive_value


# Get module logger
logger = get_logger(__name__)


class RequestHeaderLoggingMiddleware(Middleware):
    """Log incoming HTTP headers, masking Authorization values.

    Only does anything over the HTTP/SSE transports; stdio requests carry no
    headers.
    """

    def __init__(self, server_prefix: str = "SERVER", mask_auth: bool = True):
        self.server_prefix = server_prefix
        self.mask_auth = mask_auth

    async def on_request(self, context: MiddlewareContext, call_next):
        headers = get_http_headers()
        if headers:
            logger.debug(f"[{self.server_prefix}] Request: {context.method}")
            for header_name, header_value in headers.items():
                if self.mask_auth and 'authorization' in header_name.lower():
                    header_value = mask_sensitive_value(header_value, show_chars=20)
                logger.debug(f"[{self.server_prefix}]   {header_name}: {header_value}")

        return await call_next(context)


def add_standard_middleware(
    mcp: Any,
    server_prefix: str = "SERVER",
    enable_structured_logging: bool = True,
    enable_header_logging: bool = False,
    include_payloads: bool = False,
    include_payload_length: bool = True
) -> None:
    """Add the standard middleware stack to an MCP server.

    Middleware order (as per FastMCP docs):
    1. Error handling (first in, last out)
    2. Logging (last in, first out)

    Handler failures are logged but not transformed, so FastMCP still turns
    them into error tool results.

    Args:
        mcp: FastMCP server instance
        server_prefix: Prefix for log messages
        enable_structured_logging: Use StructuredLoggingMiddleware
        enable_header_logging: Add header logging middleware (HTTP only)
        include_payloads: Include request/response payloads in logs
        include_payload_length: Include payload length in logs
    """
    logger.debug(f"[{server_prefix}] Adding ErrorHandlingMiddleware")
    mcp.add_middleware(ErrorHandlingMiddleware(logger=get_logger(f"{__name__}.errors"), transform_errors=False))

    if enable_structured_logging:
        logger.debug(f"[{server_prefix}] Adding StructuredLoggingMiddleware")
        mcp.add_middleware(StructuredLoggingMiddleware(
            include_payloads=include_payloads,
            include_payload_length=include_payload_length
        ))

    if enable_header_logging:
        logger.debug(f"[{server_prefix}] Adding RequestHeaderLoggingMiddleware")
        mcp.add_middleware(RequestHeaderLoggingMiddleware(server_prefix=server_prefix))
