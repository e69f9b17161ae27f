"""Pytest configuration and fixtures."""

import logging
from collections.abc import Callable

import httpx
import pytest

from prompt_server.common import tools
from prompt_server.servers import (
    agenda_json_server,
    agenda_server,
    icebreaker_server,
    posts_server,
)

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def make_posts(count: int) -> list[dict]:
    """Build ``count`` post records shaped like the upstream API's."""
    return [
        {"userId": 1 + i // 10, "id": i + 1, "title": f"title {i + 1}", "body": f"body {i + 1}"}
        for i in range(count)
    ]


@pytest.fixture
def upstream_posts() -> list[dict]:
    """Post list served by the mocked upstream API."""
    return make_posts(12)


@pytest.fixture
def mock_upstream(monkeypatch, upstream_posts) -> Callable[..., list[httpx.Request]]:
    """Route fetch_posts to an in-process httpx.MockTransport.

    Returns a function that installs a custom handler; the default handler
    serves ``upstream_posts``. The returned list collects every request seen.
    """
    requests: list[httpx.Request] = []

    def install(handler: Callable[[httpx.Request], httpx.Response] | None = None) -> list[httpx.Request]:
        def record(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            if handler is not None:
                return handler(request)
            return httpx.Response(200, json=upstream_posts)

        monkeypatch.setattr(
            tools,
            "create_http_client",
            lambda: httpx.AsyncClient(transport=httpx.MockTransport(record)),
        )
        return requests

    install()
    return install


@pytest.fixture
def posts_mcp():
    return posts_server.create_server()


@pytest.fixture
def icebreaker_mcp():
    return icebreaker_server.create_server()


@pytest.fixture
def agendas_mcp():
    return agenda_server.create_server()


@pytest.fixture
def agendas_json_mcp():
    return agenda_json_server.create_server()


@pytest.fixture
def posts_factory() -> Callable[[int], list[dict]]:
    return make_posts
