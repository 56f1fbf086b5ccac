"""
Tests for the tool dispatcher.
"""

import json

import httpx
import pytest

from conftest import make_article

from newsagent.errors import ErrorKind
from newsagent.tools.dispatcher import ToolDispatcher
from newsagent.tools.schema import NO_ARTICLES_MESSAGE, ToolName


class TestSearchNews:
    """Tests for search_news dispatch."""

    @pytest.mark.asyncio
    async def test_scenario(self, dispatcher, technology_scenario):
        result = await dispatcher.invoke("search_news", {"searchTerm": "technology", "pageSize": 10})

        assert result.success is True
        assert result.error is None
        data = result.data
        assert data["searchTerm"] == "technology"
        assert data["totalResults"] == 3
        assert len(data["articles"]) <= 10
        titles = [a["title"] for a in data["articles"]]
        assert "Technology outage hits airports" not in titles
        assert "Technology policy debate" not in titles
        assert titles.count("Schools adopt new technology") == 1
        duplicate = data["articles"][titles.index("Schools adopt new technology")]
        assert duplicate["url"] == "https://edu.example.org/b"
        assert "message" not in data

    @pytest.mark.asyncio
    async def test_missing_search_term(self, dispatcher, fake_api):
        result = await dispatcher.invoke("search_news", {})

        assert result.success is False
        assert result.error.kind is ErrorKind.invalid_argument
        assert result.error.message == "Missing searchTerm parameter"
        assert fake_api.requests == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("term", ["", "   ", None, 42])
    async def test_blank_search_term(self, dispatcher, fake_api, term):
        result = await dispatcher.invoke("search_news", {"searchTerm": term})

        assert result.error.kind is ErrorKind.invalid_argument
        assert fake_api.requests == []

    @pytest.mark.asyncio
    async def test_invalid_page_size(self, dispatcher, fake_api):
        result = await dispatcher.invoke("search_news", {"searchTerm": "ai", "pageSize": "lots"})

        assert result.error.kind is ErrorKind.invalid_argument
        assert "pageSize" in result.error.message
        assert fake_api.requests == []

    @pytest.mark.asyncio
    async def test_default_page_size_requested_upstream(self, dispatcher, fake_api):
        await dispatcher.invoke("search_news", {"searchTerm": "ai"})

        assert {r.url.params["pageSize"] for r in fake_api.requests} == {"15"}

    @pytest.mark.asyncio
    async def test_no_matches(self, dispatcher, fake_api):
        fake_api.set_articles("top-headlines", [make_article("Weather report", "Sunny")])

        result = await dispatcher.invoke("search_news", {"searchTerm": "bitcoin"})

        assert result.success is True
        assert result.data["articles"] == []
        assert result.data["totalResults"] == 0
        assert result.data["message"] == NO_ARTICLES_MESSAGE

    @pytest.mark.asyncio
    async def test_upstream_failure(self, dispatcher, fake_api):
        fake_api.set_error("everything", httpx.ReadTimeout("timed out"))

        result = await dispatcher.invoke("search_news", {"searchTerm": "ai"})

        assert result.success is False
        assert result.error.kind is ErrorKind.upstream_failure
        assert "timed out" in result.error.message

    @pytest.mark.asyncio
    async def test_idempotent(self, dispatcher, technology_scenario):
        args = {"searchTerm": "technology", "pageSize": 10}
        first = await dispatcher.invoke("search_news", args)
        second = await dispatcher.invoke("search_news", args)

        assert first.data == second.data
        assert args == {"searchTerm": "technology", "pageSize": 10}


class TestGetNews:
    """Tests for get_news dispatch."""

    @pytest.mark.asyncio
    async def test_no_topic_uses_default_category(self, dispatcher, fake_api):
        fake_api.set_articles("everything", [make_article("Crypto markets", url="https://coins.example.com/x")])

        result = await dispatcher.invoke("get_news", {})

        assert fake_api.requests[0].url.params["q"] == "crypto"
        assert result.success is True
        assert result.data["topic"] == "general"
        assert result.data["articles"][0]["source"] == "coins.example.com"

    @pytest.mark.asyncio
    async def test_topic_echoed(self, dispatcher, fake_api):
        fake_api.set_articles("everything", [make_article("Match report")])

        result = await dispatcher.invoke("get_news", {"topic": "sports", "pageSize": 5})

        assert result.data["topic"] == "sports"
        assert fake_api.requests[0].url.params["q"] == "sports"

    @pytest.mark.asyncio
    async def test_page_size_default_is_ten(self, dispatcher, fake_api):
        fake_api.set_articles("everything", [make_article(f"story {i}") for i in range(30)])

        result = await dispatcher.invoke("get_news", None)

        assert result.data["totalResults"] == 10
        assert [a["index"] for a in result.data["articles"]] == list(range(1, 11))

    @pytest.mark.asyncio
    async def test_empty(self, dispatcher):
        result = await dispatcher.invoke("get_news", {"topic": "nothing"})

        assert result.data["articles"] == []
        assert result.data["message"] == NO_ARTICLES_MESSAGE


class TestDispatchErrors:
    """Tests for unknown tools and missing configuration."""

    @pytest.mark.asyncio
    async def test_unknown_tool(self, dispatcher, fake_api):
        result = await dispatcher.invoke("get_weather", {"city": "Seoul"})

        assert result.success is False
        assert result.error.kind is ErrorKind.unknown_tool
        assert "get_weather" in result.error.message
        assert fake_api.requests == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name,args", [("search_news", {"searchTerm": "ai"}), ("get_news", {}), ("search_news", {})])
    async def test_misconfigured(self, unconfigured_dispatcher, fake_api, name, args):
        result = await unconfigured_dispatcher.invoke(name, args)

        assert result.success is False
        assert result.error.kind is ErrorKind.misconfigured
        assert "NEWS_API_KEY" in result.error.message
        assert fake_api.requests == []

    @pytest.mark.asyncio
    async def test_non_object_arguments(self, dispatcher, fake_api):
        result = await dispatcher.invoke("get_news", ["sports"])

        assert result.error.kind is ErrorKind.invalid_argument
        assert fake_api.requests == []

    @pytest.mark.asyncio
    async def test_unexpected_exception_becomes_upstream_failure(self, settings):
        class BrokenProvider:
            name = "broken"

            async def fetch_search(self, term, limit):
                raise KeyError("articles")

            async def fetch_latest(self, topic, limit):
                raise KeyError("articles")

        result = await ToolDispatcher(settings, BrokenProvider()).invoke("get_news", {})

        assert result.error.kind is ErrorKind.upstream_failure


class TestCallTool:
    """Tests for the MCP content envelope."""

    @pytest.mark.asyncio
    async def test_success_envelope(self, dispatcher, technology_scenario):
        envelope = await dispatcher.call_tool("search_news", {"searchTerm": "technology"})

        assert list(envelope) == ["content"]
        assert len(envelope["content"]) == 1
        block = envelope["content"][0]
        assert block["type"] == "text"
        payload = json.loads(block["text"])
        assert payload["success"] is True
        assert payload["searchTerm"] == "technology"
        assert payload["totalResults"] == len(payload["articles"])

    @pytest.mark.asyncio
    async def test_error_envelope(self, dispatcher):
        envelope = await dispatcher.call_tool("search_news", {})

        payload = json.loads(envelope["content"][0]["text"])
        assert payload == {
            "success": False,
            "error": "InvalidArgument",
            "message": "Missing searchTerm parameter",
        }

    @pytest.mark.asyncio
    async def test_unknown_tool_is_text_block(self, dispatcher):
        envelope = await dispatcher.call_tool("calculate", {})

        assert envelope["content"][0] == {"type": "text", "text": "Error: Unknown tool calculate"}


class TestListTools:
    """Tests for tool descriptors."""

    def test_names_match_enum(self):
        assert [t["name"] for t in ToolDispatcher.list_tools()] == [t.value for t in ToolName]

    def test_search_requires_term(self):
        search = ToolDispatcher.list_tools()[0]
        assert search["inputSchema"]["required"] == ["searchTerm"]
