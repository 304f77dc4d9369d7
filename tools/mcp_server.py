# =============================================================================
# tools/mcp_server.py  -  FastMCP Tool Server (all seven catalog tools)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Defines the MCP tools an agent can call to browse the Books Mandala
#   catalog.  Each tool is a thin wrapper: validate input, build one
#   upstream path, call CatalogClient, format the answer as text.
#
# HOW IT WORKS (the flow):
#   1. The agent calls a tool by name via MCP (e.g. "search_books")
#   2. FastMCP validates the arguments against the declared schema.  A bad
#      argument (query too short, limit > 50) is rejected HERE, before the
#      tool body runs, so no upstream request is ever made for it.
#   3. The tool builds the upstream path and awaits catalog.fetch_json()
#   4. core/formatting.py turns the JSON into a readable text block
#
# NOT-FOUND POLICY (per tool, on purpose):
#   get_book, browse_genre and get_author turn an UpstreamError into a plain
#   "X not found: ..." text answer.  The agent gets something it can relay
#   to the user instead of a failed call.  The price: a transient upstream
#   outage also reads as "not found" for these three.  A 2xx reply with no
#   book or author record in "data" gets the same answer.
#
#   search_books, list_genres, bestsellers and new_arrivals let the error
#   propagate, and FastMCP reports it as a tool error.
#
# DEPENDENCY INJECTION:
#   create_server(catalog) builds a fresh FastMCP instance around whatever
#   client it is given.  The tool closures capture only that client, which
#   in turn holds only the immutable API key and base URL.  Tests pass a
#   fake client; main() passes a real one built from the environment.
#
# RUNNING THIS SERVER:
#   a) stdio (for local agents):   python -m tools.mcp_server
#   b) HTTP (for remote agents):   uvicorn --factory tools.http_app:build_app
# =============================================================================

import logging
import sys
from typing import Annotated, Any, Protocol
from urllib.parse import quote, urlencode

from fastmcp import FastMCP
from pydantic import Field

from core.catalog_client import CatalogClient, UpstreamError
from core.config import load_settings
from core.formatting import (
    author_to_text,
    book_detail_to_text,
    books_to_text,
    genres_to_text,
    with_more_notice,
)
from core.models import Author, BookDetail, BookSummary, Genre, PageMeta

SERVER_NAME = "Books Mandala"
SERVER_DESCRIPTION = (
    "MCP server for AI agents to search, browse, and discover books from "
    "Nepal's leading online bookstore."
)
WEBSITE = "https://booksmandala.com"

TOOL_NAMES = (
    "search_books",
    "get_book",
    "list_genres",
    "browse_genre",
    "bestsellers",
    "new_arrivals",
    "get_author",
)

logger = logging.getLogger(__name__)


# =============================================================================
# Logging Setup
# =============================================================================
# Logs go to STDERR because, on the stdio transport, STDOUT *is* the MCP
# message stream.  A stray log line on stdout corrupts the protocol.
#
# Colour codes make tool calls easy to spot in a terminal:
#   CYAN   → incoming request (tool name + parameters)
#   YELLOW → intermediate status
#   GREEN  → response summary
# =============================================================================
_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"


def configure_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, text: str) -> str:
    """Log the size of the text answer in GREEN, then return it."""
    first_line = text.split("\n", 1)[0]
    logger.info(f"{_GREEN}  ← {tool_name} response ({len(text)} chars): "
                f"{first_line}{_RESET}")
    return text


# =============================================================================
# Path helpers
# =============================================================================
def _segment(value: str) -> str:
    """Percent-encode a user-supplied identifier for use as a path segment."""
    return quote(value, safe="")


def _with_query(path: str, **params) -> str:
    query = urlencode({k: v for k, v in params.items() if v is not None})
    return f"{path}?{query}" if query else path


def _books(envelope: dict) -> list[BookSummary]:
    return [BookSummary.from_api(item) for item in envelope.get("data") or []]


# =============================================================================
# Shared parameter types
# =============================================================================
# Declared once so every paginating tool advertises the same bounds.
# pydantic turns these into JSON Schema for the agent AND enforces them.
# =============================================================================
Page = Annotated[int, Field(ge=1, description="Page number (default 1)")]
Limit = Annotated[
    int, Field(ge=1, le=50, description="Results per page, max 50 (default 20)")
]


class CatalogSource(Protocol):
    """Anything with CatalogClient's fetch_json() can back the tools."""

    async def fetch_json(self, path: str) -> Any: ...


# =============================================================================
# Server factory
# =============================================================================
def create_server(catalog: CatalogSource) -> FastMCP:
    """Build a FastMCP server whose tools talk to the given catalog client."""
    mcp = FastMCP(SERVER_NAME, instructions=SERVER_DESCRIPTION)

    # -------------------------------------------------------------------------
    # TOOL 1: search_books
    # -------------------------------------------------------------------------
    @mcp.tool()
    async def search_books(
        query: Annotated[
            str,
            Field(min_length=2,
                  description="Search query: book title, author name, or ISBN"),
        ],
        page: Page = 1,
        limit: Limit = 20,
    ) -> str:
        """Search for books by title, author name, or ISBN from Books Mandala's
        catalog of 50,000+ titles. Returns matching books with prices in NPR
        and stock availability."""
        _log_request("search_books", query=query, page=page, limit=limit)

        envelope = await catalog.fetch_json(
            _with_query("/search", q=query, page=page, limit=limit)
        )
        books = _books(envelope)
        meta = PageMeta.from_api(envelope.get("meta"))
        _log_status(f"Got {len(books)} books, has_more={meta.has_more}")

        if not books:
            return _log_response("search_books", f'No books found for "{query}".')

        count = meta.results_on_page if meta.results_on_page is not None else len(books)
        shown_page = meta.page if meta.page is not None else page
        text = (f'Found {count} results for "{query}" (page {shown_page}):\n\n'
                f"{books_to_text(books)}")
        return _log_response("search_books", with_more_notice(text, meta))

    # -------------------------------------------------------------------------
    # TOOL 2: get_book
    # -------------------------------------------------------------------------
    @mcp.tool()
    async def get_book(
        identifier: Annotated[
            str,
            Field(description="ISBN (e.g. 9781847941831) or book slug "
                              "(e.g. atomic-habits)"),
        ],
    ) -> str:
        """Get detailed information about a specific book by ISBN or slug.
        Returns full details including description, publisher, pages, ratings,
        and purchase link."""
        _log_request("get_book", identifier=identifier)

        try:
            envelope = await catalog.fetch_json(f"/books/{_segment(identifier)}")
        except UpstreamError as exc:
            _log_status(f"Lookup failed ({exc}), reporting not found")
            return _log_response("get_book", f"Book not found: {identifier}")

        data = envelope.get("data") if isinstance(envelope, dict) else None
        if not isinstance(data, dict) or not data:
            _log_status("Empty book record, reporting not found")
            return _log_response("get_book", f"Book not found: {identifier}")

        book = BookDetail.from_api(data)
        return _log_response("get_book", book_detail_to_text(book))

    # -------------------------------------------------------------------------
    # TOOL 3: list_genres
    # -------------------------------------------------------------------------
    @mcp.tool()
    async def list_genres() -> str:
        """List all book genres available on Books Mandala. Returns genre names,
        slugs, and parent categories. Use genre slugs to browse books by genre."""
        _log_request("list_genres")

        envelope = await catalog.fetch_json("/genres")
        genres = [Genre.from_api(item) for item in envelope.get("data") or []]
        meta = PageMeta.from_api(envelope.get("meta"))
        _log_status(f"Got {len(genres)} genres")
        return _log_response("list_genres", genres_to_text(genres, meta.total))

    # -------------------------------------------------------------------------
    # TOOL 4: browse_genre
    # -------------------------------------------------------------------------
    @mcp.tool()
    async def browse_genre(
        genre_slug: Annotated[
            str,
            Field(description="Genre slug (e.g. fiction-and-literature, "
                              "self-help, manga)"),
        ],
        page: Page = 1,
        limit: Limit = 20,
    ) -> str:
        """Browse books within a specific genre. Use a genre slug from
        list_genres."""
        _log_request("browse_genre", genre_slug=genre_slug, page=page, limit=limit)

        path = _with_query(f"/genres/{_segment(genre_slug)}/books",
                           page=page, limit=limit)
        try:
            envelope = await catalog.fetch_json(path)
        except UpstreamError as exc:
            _log_status(f"Lookup failed ({exc}), reporting not found")
            return _log_response("browse_genre", f"Genre not found: {genre_slug}")

        books = _books(envelope)
        if not books:
            return _log_response("browse_genre",
                                 f'No books found in genre "{genre_slug}".')

        meta = PageMeta.from_api(envelope.get("meta"))
        text = f'Books in "{genre_slug}":\n\n{books_to_text(books)}'
        return _log_response("browse_genre", with_more_notice(text, meta))

    # -------------------------------------------------------------------------
    # TOOLS 5 & 6: bestsellers, new_arrivals
    # -------------------------------------------------------------------------
    # Same shape: a fixed endpoint, page/limit, a heading.  Errors propagate.
    # -------------------------------------------------------------------------
    async def _book_list(tool_name: str, path: str, heading: str,
                         page: int, limit: int) -> str:
        envelope = await catalog.fetch_json(_with_query(path, page=page, limit=limit))
        books = _books(envelope)
        _log_status(f"Got {len(books)} books")
        if not books:
            return _log_response(tool_name, f"No {heading.lower()} found.")

        meta = PageMeta.from_api(envelope.get("meta"))
        text = f"{heading}:\n\n{books_to_text(books)}"
        return _log_response(tool_name, with_more_notice(text, meta))

    @mcp.tool()
    async def bestsellers(page: Page = 1, limit: Limit = 20) -> str:
        """Get current bestselling books on Books Mandala."""
        _log_request("bestsellers", page=page, limit=limit)
        return await _book_list("bestsellers", "/bestsellers", "Bestsellers",
                                page, limit)

    @mcp.tool()
    async def new_arrivals(page: Page = 1, limit: Limit = 20) -> str:
        """Get recently added books (last 45 days) on Books Mandala."""
        _log_request("new_arrivals", page=page, limit=limit)
        return await _book_list("new_arrivals", "/new-arrivals", "New Arrivals",
                                page, limit)

    # -------------------------------------------------------------------------
    # TOOL 7: get_author
    # -------------------------------------------------------------------------
    @mcp.tool()
    async def get_author(
        author_slug: Annotated[
            str,
            Field(description="Author slug (e.g. james-clear, paulo-coelho)"),
        ],
        limit: Annotated[
            int, Field(ge=1, le=50, description="Max books to return (default 20)")
        ] = 20,
    ) -> str:
        """Get author details and their available books on Books Mandala."""
        _log_request("get_author", author_slug=author_slug, limit=limit)

        path = _with_query(f"/authors/{_segment(author_slug)}", limit=limit)
        try:
            envelope = await catalog.fetch_json(path)
        except UpstreamError as exc:
            _log_status(f"Lookup failed ({exc}), reporting not found")
            return _log_response("get_author", f"Author not found: {author_slug}")

        data = envelope.get("data") if isinstance(envelope, dict) else None
        if not isinstance(data, dict) or not isinstance(data.get("author"), dict):
            _log_status("Empty author record, reporting not found")
            return _log_response("get_author", f"Author not found: {author_slug}")

        author = Author.from_api(envelope)
        _log_status(f"Got {len(author.books)} of {author.books_count} books")
        return _log_response("get_author", author_to_text(author))

    return mcp


def create_server_from_env() -> FastMCP:
    """Build the production server: settings from the environment/.env."""
    settings = load_settings()
    return create_server(CatalogClient.from_settings(settings))


# =============================================================================
# Server entry point
# =============================================================================
# `python -m tools.mcp_server` (or the books-mandala-mcp script) serves over
# stdio, which is what local agents such as agent/bookstore_agent.py expect.
# =============================================================================
def main() -> None:
    configure_logging()
    create_server_from_env().run()


if __name__ == "__main__":
    main()
