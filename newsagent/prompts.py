"""
Example conversations served as MCP prompts.

Each example pairs a user request with the tool call an agent should make,
with <searchTerm>/<topic> left as placeholders.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List

from .tools.schema import ToolName


SEARCH_NEWS_REQUESTS = [
    "what's the latest news about <searchTerm>?",
    "can you show me the latest news about <searchTerm>?",
    "search for news about <searchTerm>",
    "find articles about <searchTerm>",
    "what's happening with <searchTerm>?",
    "show me current events about <searchTerm>",
    "what's going on in the world of <searchTerm>?",
    "tell me about <searchTerm> news",
]

GET_NEWS_REQUESTS = [
    "what's in the <topic> news today?",
    "give me the latest headlines about <topic>",
    "show me news updates about <topic>",
    "what are today's top stories about <topic>?",
    "get me the latest <topic> headlines",
    "what's the latest in <topic>?",
    "show me today's <topic> news",
    "what's new in <topic>?",
]

# requests that should call get_news without a topic
GET_NEWS_UNSCOPED_REQUESTS = [
    "get latest news",
    "show me top headlines",
]


def _exchange(text: str, action: str, tool: ToolName, params: Dict[str, str]) -> List[Dict[str, Any]]:
    return [
        {"user": "{{user1}}", "content": {"text": text}},
        {
            "user": "{{agent}}",
            "content": {"text": "", "action": action, "tool": tool.value, "params": params},
        },
    ]


def search_news_examples() -> str:
    examples = [
        _exchange(text, "SEARCH_NEWS", ToolName.search_news, {"searchTerm": "<searchTerm>"})
        for text in SEARCH_NEWS_REQUESTS
    ]
    return json.dumps(
        {
            "tool": ToolName.search_news.value,
            "description": "Training examples for AI agent - search news conversations",
            "examples": examples,
        },
        indent=2,
    )


def get_news_examples() -> str:
    examples = [
        _exchange(text, "GET_NEWS", ToolName.get_news, {"topic": "<topic>"})
        for text in GET_NEWS_REQUESTS
    ]
    examples += [
        _exchange(text, "GET_NEWS", ToolName.get_news, {})
        for text in GET_NEWS_UNSCOPED_REQUESTS
    ]
    return json.dumps(
        {
            "tool": ToolName.get_news.value,
            "description": "Training examples for AI agent - get latest news conversations",
            "examples": examples,
        },
        indent=2,
    )
