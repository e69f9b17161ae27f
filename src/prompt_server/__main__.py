"""Run one prompt-server variant.

Usage:
    python -m prompt_server [posts|icebreaker|agendas|agendas-json]

Environment:
    MCP_SERVER: variant to run when no argument is given (default: icebreaker)
    MCP_TRANSPORT: stdio, http or sse (default: stdio)
    PORT: port for the http/sse transports (default: 8000)
    LOG_LEVEL: logging level name (default: INFO)
"""

import os
import sys
from collections.abc import Callable

from fastmcp import FastMCP

from prompt_server.common.constants import (
    DEFAULT_PORT,
    DEFAULT_SERVER_VARIANT,
    DEFAULT_TRANSPORT,
    SERVER_NAME,
    SERVER_VARIANT_AGENDAS,
    SERVER_VARIANT_AGENDAS_JSON,
    SERVER_VARIANT_ICEBREAKER,
    SERVER_VARIANT_POSTS,
    SUPPORTED_TRANSPORTS,
)
from prompt_server.common.logging import get_logger, log_startup, parse_log_level, setup_logging
from prompt_server.servers import (
    agenda_json_server,
    agenda_server,
    icebreaker_server,
    posts_server,
)

logger = get_logger(__name__)

SERVERS: dict[str, Callable[..., FastMCP]] = {
    SERVER_VARIANT_POSTS: posts_server.create_server,
    SERVER_VARIANT_ICEBREAKER: icebreaker_server.create_server,
    SERVER_VARIANT_AGENDAS: agenda_server.create_server,
    SERVER_VARIANT_AGENDAS_JSON: agenda_json_server.create_server,
}


def resolve_variant(argv: list[str], environ: dict[str, str]) -> str:
    """Pick the variant from the first argument, then MCP_SERVER."""
    variant = argv[0] if argv else environ.get("MCP_SERVER", DEFAULT_SERVER_VARIANT)
    if variant not in SERVERS:
        raise SystemExit(f"Unknown server variant '{variant}'. Choose one of: {', '.join(SERVERS)}")
    return variant


def resolve_transport(environ: dict[str, str]) -> str:
    transport = environ.get("MCP_TRANSPORT", DEFAULT_TRANSPORT).lower()
    if transport not in SUPPORTED_TRANSPORTS:
        raise SystemExit(
            f"Unknown transport '{transport}'. Choose one of: {', '.join(SUPPORTED_TRANSPORTS)}"
        )
    return transport


def resolve_port(environ: dict[str, str]) -> int:
    value = environ.get("PORT", str(DEFAULT_PORT))
    try:
        return int(value)
    except ValueError:
        raise SystemExit(f"Invalid PORT '{value}': expected an integer") from None


def main(argv: list[str] | None = None) -> None:
    """Start the selected server and block until the transport closes."""
    argv = sys.argv[1:] if argv is None else argv
    environ = dict(os.environ)

    setup_logging(level=parse_log_level(environ.get("LOG_LEVEL")))
    variant = resolve_variant(argv, environ)
    transport = resolve_transport(environ)

    server = SERVERS[variant](enable_header_logging=transport != "stdio")

    if transport == "stdio":
        log_startup(logger, SERVER_NAME, transport, variant=variant)
        server.run(transport="stdio")
    else:
        port = resolve_port(environ)
        log_startup(logger, SERVER_NAME, transport, variant=variant, port=port)
        server.run(transport=transport, port=port)


if __name__ == "__main__":
    main()
