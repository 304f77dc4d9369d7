# =============================================================================
# tools/http_app.py  -  HTTP Entry Surface (for remote agents)
# =============================================================================
#
# ROUTES:
#   GET /      → static JSON descriptor (name, tools, where the MCP lives)
#   /mcp       → FastMCP's streamable-HTTP transport
#   anything else → 404
#
# RUNNING:
#   uvicorn --factory tools.http_app:build_app --port 8000
#
# create_http_app() takes an already-built FastMCP server so tests can mount
# a server backed by a fake catalog client.
# =============================================================================

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import JSONResponse

from tools.mcp_server import (
    SERVER_DESCRIPTION,
    SERVER_NAME,
    TOOL_NAMES,
    WEBSITE,
    configure_logging,
    create_server_from_env,
)

MCP_PATH = "/mcp"


def describe(origin: str) -> dict:
    """The discovery document served at the root path."""
    return {
        "name": f"{SERVER_NAME} Agent MCP",
        "description": SERVER_DESCRIPTION,
        "mcp_endpoint": f"{origin}{MCP_PATH}",
        "website": WEBSITE,
        "tools": list(TOOL_NAMES),
    }


def create_http_app(mcp: FastMCP):
    """Wrap a FastMCP server in an ASGI app with the discovery route."""

    @mcp.custom_route("/", methods=["GET"])
    async def index(request: Request) -> JSONResponse:
        origin = f"{request.url.scheme}://{request.url.netloc}"
        return JSONResponse(describe(origin))

    return mcp.http_app(path=MCP_PATH)


def build_app():
    """uvicorn factory: production server built from the environment."""
    configure_logging()
    return create_http_app(create_server_from_env())
