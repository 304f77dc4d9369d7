# =============================================================================
# agent/bookstore_agent.py  -  Google ADK Agent wired to the catalog tools
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Creates the ADK agent that answers customer questions by calling the
#   seven catalog tools served by tools/mcp_server.py.
#
# HOW THE PIECES CONNECT:
#
#   main.py (console)  →  ADK Agent  →  LiteLlm  →  model provider
#                              │
#                              └── MCPToolset (stdio)
#                                        │
#                                        ▼
#                           python -m tools.mcp_server
#                                        │
#                                        ▼
#                             Books Mandala agent API
#
# MCP CONNECTION:
#   ADK starts the tool server as a subprocess and speaks MCP over its
#   stdin/stdout.  The subprocess runs from the project root so that
#   `core` and `tools` import, and it inherits our environment so it can
#   read BM_API_KEY.
#
# MODEL CHOICE:
#   Any LiteLlm model string works.  Set BOOKSTORE_AGENT_MODEL to switch
#   (e.g. "openrouter/anthropic/claude-3.5-sonnet"); the provider's API key
#   is read from the environment by LiteLlm itself.
# =============================================================================

import os
import sys

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from agent.prompt import get_bookstore_prompt

DEFAULT_MODEL = "openrouter/openai/gpt-4o"

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def create_catalog_toolset() -> MCPToolset:
    """MCPToolset that launches the catalog tool server over stdio.

    sys.executable is used instead of a bare "python" so the subprocess
    runs inside the same virtual environment as the agent.
    """
    return MCPToolset(
        connection_params=StdioServerParameters(
            command=sys.executable,
            args=["-m", "tools.mcp_server"],
            cwd=PROJECT_ROOT,
            env=dict(os.environ),
        ),
    )


def create_agent(model: str | None = None) -> Agent:
    """Create the Books Mandala assistant agent.

    Args:
        model: LiteLlm model string.  Falls back to BOOKSTORE_AGENT_MODEL,
               then to DEFAULT_MODEL.

    Returns:
        A configured Google ADK Agent whose only tools are the catalog tools.
    """
    model = model or os.environ.get("BOOKSTORE_AGENT_MODEL", DEFAULT_MODEL)

    return Agent(
        name="books_mandala_assistant",
        model=LiteLlm(model=model),
        instruction=get_bookstore_prompt(),
        tools=[create_catalog_toolset()],
    )
