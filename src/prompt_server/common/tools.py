"""Common MCP tools shared across the server variants."""

import random
from typing import Any

import httpx
from fastmcp import Context

from prompt_server.common.constants import ICEBREAKERS, POSTS_LIMIT, POSTS_URL
from prompt_server.common.logging import get_logger

logger = get_logger(__name__)


def get_fetch_posts_tool() -> tuple[str, str]:
    """Get fetch_posts tool definition.

    Returns:
        Tuple of (name, description)
    """
    name = "fetch_posts"
    description = "Fetches a list of posts from a public API."
    return name, description


def create_http_client() -> httpx.AsyncClient:
    """Create the HTTP client used for one upstream request.

    No timeout: a slow upstream is waited on, never cut off.
    """
    return httpx.AsyncClient(timeout=None)


async def load_posts(
    client: httpx.AsyncClient,
    url: str = POSTS_URL,
    limit: int = POSTS_LIMIT,
) -> list[Any]:
    """Download the post list and keep the first ``limit`` entries.

    Args:
        client: HTTP client to issue the GET with
        url: Endpoint returning a JSON array of posts
        limit: Maximum number of posts to keep

    Returns:
        At most ``limit`` post records, in upstream order

    Raises:
        httpx.HTTPError: The request failed or returned an error status
        ValueError: The body is not JSON or not a JSON array
    """
    response = await client.get(url)
    response.raise_for_status()
    posts = response.json()
    if not isinstance(posts, list):
        raise ValueError(f"Expected a list of posts from {url}, got {type(posts).__name__}")
    logger.debug(f"Upstream returned {len(posts)} posts")
    return posts[:limit]


async def fetch_posts(ctx: Context) -> dict:
    """Fetch the first five posts from the public posts API.

    Returns:
        Dictionary with a ``posts`` list
    """
    async with create_http_client() as client:
        posts = await load_posts(client)
    await ctx.info(f"Fetched {len(posts)} posts")
    return {"posts": posts}


def get_morning_icebreaker_tool() -> tuple[str, str]:
    """Get morning_icebreaker tool definition.

    Returns:
        Tuple of (name, description)
    """
    name = "morning_icebreaker"
    description = "朝会で使えるアイスブレイクネタを提案します"
    return name, description


def morning_icebreaker() -> str:
    """Pick one icebreaker question at random."""
    return random.choice(ICEBREAKERS)
