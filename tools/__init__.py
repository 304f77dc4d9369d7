# =============================================================================
# tools/__init__.py
# =============================================================================
# FastMCP wiring for the catalog.
#
#   mcp_server.py  the seven tools plus the stdio entry point
#   http_app.py    the same tools over streamable HTTP, with a discovery
#                  document at "/"
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT parse or format catalog data themselves (core/ does)
#   - They do NOT keep state between calls
#   - They do NOT retry; one tool call makes at most one upstream request
#
# TOOL CONTRACTS:
#   Each tool's docstring becomes its MCP description and each parameter's
#   pydantic Field becomes its JSON Schema.  The agent reads both to decide
#   what to call, so keep them specific.
# =============================================================================
