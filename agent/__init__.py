# =============================================================================
# agent/__init__.py
# =============================================================================
# Optional Google ADK agent that talks to the catalog tools over MCP.
#
# The MCP server in tools/ works on its own with any MCP client; this
# package is a ready-made console assistant for trying the tools out.
# It holds no catalog logic.  Everything it knows about books comes back
# from tool calls.
# =============================================================================
