# =============================================================================
# core/__init__.py
# =============================================================================
# Catalog logic for the Books Mandala MCP server: settings, the upstream API
# client, the data models and the text formatter.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP, Google ADK, or any other agent
#   framework.  The formatter and models are pure Python and can be tested
#   with plain dicts; the client needs only httpx.
# =============================================================================
