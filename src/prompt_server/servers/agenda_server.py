"""prompt-server, agendas variant.

Adds get_top_udm_agendas to the icebreaker tools. The agenda tool is a stub:
it returns instructions for querying Jira by hand.
"""

from fastmcp import FastMCP

from prompt_server.common.agendas import get_top_udm_agendas, get_top_udm_agendas_tool
from prompt_server.common.constants import SERVER_NAME, SERVER_VERSION
from prompt_server.common.logging import get_logger, log_startup
from prompt_server.common.middleware import add_standard_middleware
from prompt_server.common.prompts import get_poem_writer_prompt, poem_writer
from prompt_server.common.tools import (
    fetch_posts,
    get_fetch_posts_tool,
    get_morning_icebreaker_tool,
    morning_icebreaker,
)


# Get module logger
logger = get_logger(__name__)


def create_server(enable_header_logging: bool = False) -> FastMCP:
    """Create the agendas variant.

    Args:
        enable_header_logging: Log HTTP headers (only useful over HTTP/SSE)

    Returns:
        Configured FastMCP server
    """
    mcp = FastMCP(name=SERVER_NAME, version=SERVER_VERSION)

    add_standard_middleware(
        mcp,
        server_prefix="AGENDAS",
        enable_header_logging=enable_header_logging,
    )

    name, description = get_fetch_posts_tool()
    mcp.tool(fetch_posts, name=name, description=description)

    name, title, description = get_poem_writer_prompt()
    mcp.prompt(poem_writer, name=name, title=title, description=description)

    name, description = get_morning_icebreaker_tool()
    mcp.tool(morning_icebreaker, name=name, description=description)

    name, description = get_top_udm_agendas_tool()
    mcp.tool(get_top_udm_agendas, name=name, description=description)

    return mcp


if __name__ == "__main__":
    server = create_server()
    log_startup(logger, SERVER_NAME, "stdio", variant="agendas")
    server.run(transport="stdio")
