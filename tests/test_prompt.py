"""Tests for the assistant's system prompt."""
from datetime import date

from agent.prompt import get_bookstore_prompt
from tools.mcp_server import TOOL_NAMES


def test_prompt_mentions_every_tool():
    prompt = get_bookstore_prompt()
    for name in TOOL_NAMES:
        assert name in prompt


def test_prompt_carries_todays_date():
    assert date.today().isoformat() in get_bookstore_prompt()
