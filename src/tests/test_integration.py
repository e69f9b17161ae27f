"""Integration tests for the server variants.

These tests validate that each variant:
1. Registers exactly its tools and the poem-writer prompt
2. Answers tool calls and prompt requests through an MCP client
3. Reports handler failures as errors
"""

import json

import httpx
import pytest
from fastmcp import Client

from prompt_server.common.agendas import AGENDA_INSTRUCTIONS
from prompt_server.common.constants import ICEBREAKERS, POSTS_URL
from prompt_server.servers import icebreaker_server

POSTS_TOOLS = {"fetch_posts"}
ICEBREAKER_TOOLS = POSTS_TOOLS | {"morning_icebreaker"}
AGENDA_TOOLS = ICEBREAKER_TOOLS | {"get_top_udm_agendas"}


async def list_tool_names(server) -> set[str]:
    async with Client(server) as client:
        tools = await client.list_tools()
    return {tool.name for tool in tools}


class TestRegistration:
    """Tests for what each variant exposes."""

    @pytest.mark.asyncio
    async def test_posts_variant_tools(self, posts_mcp) -> None:
        assert await list_tool_names(posts_mcp) == POSTS_TOOLS

    @pytest.mark.asyncio
    async def test_icebreaker_variant_tools(self, icebreaker_mcp) -> None:
        assert await list_tool_names(icebreaker_mcp) == ICEBREAKER_TOOLS

    @pytest.mark.asyncio
    async def test_agendas_variant_tools(self, agendas_mcp) -> None:
        assert await list_tool_names(agendas_mcp) == AGENDA_TOOLS

    @pytest.mark.asyncio
    async def test_agendas_json_variant_tools(self, agendas_json_mcp) -> None:
        assert await list_tool_names(agendas_json_mcp) == AGENDA_TOOLS

    @pytest.mark.asyncio
    async def test_tools_take_no_arguments(self, agendas_json_mcp) -> None:
        async with Client(agendas_json_mcp) as client:
            tools = await client.list_tools()

        for tool in tools:
            assert tool.inputSchema.get("type") == "object"
            assert not tool.inputSchema.get("properties"), tool.name
            assert tool.description

    @pytest.mark.asyncio
    async def test_poem_writer_prompt_registered(self, icebreaker_mcp) -> None:
        async with Client(icebreaker_mcp) as client:
            prompts = await client.list_prompts()

        assert [prompt.name for prompt in prompts] == ["poem-writer"]
        prompt = prompts[0]
        assert prompt.title == "Poem Writer"
        assert prompt.description == "Write a nice haiku"
        required = {argument.name: argument.required for argument in prompt.arguments}
        assert required == {"title": True, "mood": False}


class TestFetchPosts:
    """Tests for fetch_posts through the MCP client."""

    @pytest.mark.asyncio
    async def test_returns_first_five_posts(self, posts_mcp, mock_upstream, upstream_posts) -> None:
        async with Client(posts_mcp) as client:
            result = await client.call_tool("fetch_posts", {})

        payload = json.loads(result.content[0].text)
        assert payload == {"posts": upstream_posts[:5]}

    @pytest.mark.asyncio
    async def test_one_request_per_call(self, icebreaker_mcp, mock_upstream) -> None:
        requests = mock_upstream()

        async with Client(icebreaker_mcp) as client:
            await client.call_tool("fetch_posts", {})
            await client.call_tool("fetch_posts", {})

        assert [str(request.url) for request in requests] == [POSTS_URL, POSTS_URL]

    @pytest.mark.asyncio
    async def test_short_upstream_list(self, posts_mcp, mock_upstream, posts_factory) -> None:
        posts = posts_factory(2)
        mock_upstream(lambda request: httpx.Response(200, json=posts))

        async with Client(posts_mcp) as client:
            result = await client.call_tool("fetch_posts", {})

        assert json.loads(result.content[0].text)["posts"] == posts

    @pytest.mark.asyncio
    async def test_sends_log_notification(self, posts_mcp, mock_upstream) -> None:
        received = []

        async def collect(message) -> None:
            received.append(message)

        async with Client(posts_mcp, log_handler=collect) as client:
            await client.call_tool("fetch_posts", {})

        assert received
        assert received[-1].level == "info"
        assert "Fetched 5 posts" in str(received[-1].data)

    @pytest.mark.asyncio
    async def test_upstream_failure_is_an_error(self, posts_mcp, mock_upstream) -> None:
        mock_upstream(lambda request: httpx.Response(500))

        with pytest.raises(Exception):
            async with Client(posts_mcp) as client:
                await client.call_tool("fetch_posts", {})


class TestOfflineTools:
    """Tests for the tools that need no network access."""

    @pytest.mark.asyncio
    async def test_morning_icebreaker(self, icebreaker_mcp) -> None:
        async with Client(icebreaker_mcp) as client:
            for _ in range(10):
                result = await client.call_tool("morning_icebreaker", {})
                assert result.content[0].text in ICEBREAKERS

    @pytest.mark.asyncio
    async def test_agenda_instructions(self, agendas_mcp) -> None:
        async with Client(agendas_mcp) as client:
            first = await client.call_tool("get_top_udm_agendas", {})
            second = await client.call_tool("get_top_udm_agendas", {})

        assert first.content[0].text == AGENDA_INSTRUCTIONS
        assert second.content[0].text == first.content[0].text

    @pytest.mark.asyncio
    async def test_agenda_report(self, agendas_json_mcp) -> None:
        async with Client(agendas_json_mcp) as client:
            result = await client.call_tool("get_top_udm_agendas", {})

        report = json.loads(result.content[0].text)
        assert report["success"] is True
        assert report["status"] == "not_implemented"
        assert report["instructions"] == AGENDA_INSTRUCTIONS
        assert report["procedure"]["implemented"] is False

    @pytest.mark.asyncio
    async def test_unknown_tool_is_an_error(self, posts_mcp) -> None:
        with pytest.raises(Exception):
            async with Client(posts_mcp) as client:
                await client.call_tool("morning_icebreaker", {})


class TestPoemWriterPrompt:
    """Tests for rendering poem-writer through the MCP client."""

    @pytest.mark.asyncio
    async def test_with_mood(self, posts_mcp) -> None:
        async with Client(posts_mcp) as client:
            result = await client.get_prompt("poem-writer", {"title": "First Snow", "mood": "quiet"})

        assert len(result.messages) == 1
        message = result.messages[0]
        assert message.role == "user"
        assert message.content.text.startswith("Write a haiku with the mood quiet called First Snow.")

    @pytest.mark.asyncio
    async def test_without_mood(self, agendas_mcp) -> None:
        async with Client(agendas_mcp) as client:
            result = await client.get_prompt("poem-writer", {"title": "First Snow"})

        text = result.messages[0].content.text
        assert "First Snow" in text
        assert "with the mood" not in text

    @pytest.mark.asyncio
    async def test_missing_title_is_an_error(self, posts_mcp) -> None:
        with pytest.raises(Exception):
            async with Client(posts_mcp) as client:
                await client.get_prompt("poem-writer", {"mood": "quiet"})


class TestHeaderLogging:

    @pytest.mark.asyncio
    async def test_header_middleware_is_inert_without_http(self) -> None:
        server = icebreaker_server.create_server(enable_header_logging=True)

        async with Client(server) as client:
            result = await client.call_tool("morning_icebreaker", {})

        assert result.content[0].text in ICEBREAKERS
