"""Demo client for the prompt servers.

Spawns a server variant over stdio (or takes an in-process FastMCP instance),
then pings it, lists its tools and prompts, calls the offline tools and
renders the poem-writer prompt.
"""

import asyncio
import sys
from typing import Any

from fastmcp import Client, FastMCP
from fastmcp.client.transports import StdioTransport

from prompt_server.common.client_logging import default_log_handler
from prompt_server.common.constants import DEFAULT_SERVER_VARIANT, POEM_PROMPT_NAME
from prompt_server.common.logging import get_logger, setup_logging


logger = get_logger(__name__)

# Tools that need no network access
OFFLINE_TOOLS = ("morning_icebreaker", "get_top_udm_agendas")


def stdio_transport(variant: str = DEFAULT_SERVER_VARIANT) -> StdioTransport:
    """Transport that launches ``python -m prompt_server <variant>``."""
    return StdioTransport(command=sys.executable, args=["-m", "prompt_server", variant])


async def run_client_demo(
    target: FastMCP | StdioTransport,
    poem_title: str = "Morning Coffee",
    poem_mood: str | None = "calm",
) -> dict[str, Any]:
    """Exercise a server and return what it answered.

    Args:
        target: Server instance or transport to connect to
        poem_title: Title passed to the poem-writer prompt
        poem_mood: Mood passed to the poem-writer prompt (omitted when None)

    Returns:
        Dictionary with ``tools``, ``prompts``, ``results`` (tool name to
        text) and ``poem`` (rendered prompt text)
    """
    async with Client(target, log_handler=default_log_handler) as client:
        await client.ping()
        logger.info("✓ Ping successful")

        tools = await client.list_tools()
        tool_names = [tool.name for tool in tools]
        logger.info(f"✓ Available tools: {tool_names}")

        prompts = await client.list_prompts()
        prompt_names = [prompt.name for prompt in prompts]
        logger.info(f"✓ Available prompts: {prompt_names}")

        results = {}
        for name in OFFLINE_TOOLS:
            if name not in tool_names:
                continue
            result = await client.call_tool(name, {})
            results[name] = result.content[0].text
            logger.info(f"✓ {name} result: {results[name]}")

        arguments = {"title": poem_title}
        if poem_mood is not None:
            arguments["mood"] = poem_mood
        prompt = await client.get_prompt(POEM_PROMPT_NAME, arguments)
        poem = prompt.messages[0].content.text
        logger.info(f"✓ {POEM_PROMPT_NAME} prompt: {poem}")

    return {"tools": tool_names, "prompts": prompt_names, "results": results, "poem": poem}


if __name__ == "__main__":
    setup_logging()
    variant = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_SERVER_VARIANT
    logger.info(f"Testing stdio client against the '{variant}' variant")
    asyncio.run(run_client_demo(stdio_transport(variant)))
