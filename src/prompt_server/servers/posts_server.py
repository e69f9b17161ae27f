"""prompt-server, posts variant.

Tools: fetch_posts. Prompts: poem-writer.
"""

from fastmcp import FastMCP

from prompt_server.common.constants import SERVER_NAME, SERVER_VERSION
from prompt_server.common.logging import get_logger, log_startup
from prompt_server.common.middleware import add_standard_middleware
from prompt_server.common.prompts import get_poem_writer_prompt, poem_writer
from prompt_server.common.tools import fetch_posts, get_fetch_posts_tool


# Get module logger
logger = get_logger(__name__)


def create_server(enable_header_logging: bool = False) -> FastMCP:
    """Create the posts variant.

    Args:
        enable_header_logging: Log HTTP headers (only useful over HTTP/SSE)

    Returns:
        Configured FastMCP server
    """
    mcp = FastMCP(name=SERVER_NAME, version=SERVER_VERSION)

    add_standard_middleware(
        mcp,
        server_prefix="POSTS",
        enable_header_logging=enable_header_logging,
    )

    name, description = get_fetch_posts_tool()
    mcp.tool(fetch_posts, name=name, description=description)

    name, title, description = get_poem_writer_prompt()
    mcp.prompt(poem_writer, name=name, title=title, description=description)

    return mcp


if __name__ == "__main__":
    server = create_server()
    log_startup(logger, SERVER_NAME, "stdio", variant="posts")
    server.run(transport="stdio")
