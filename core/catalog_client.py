# =============================================================================
# core/catalog_client.py  -  Upstream Books Mandala API Client
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Issues ONE authenticated GET against the Books Mandala agent API and
#   returns the parsed JSON body.  That's it.  No schema checks, no retries,
#   no caching: the tools decide what to do with the result.
#
# HOW IT WORKS:
#   1. Join the configured base URL with the requested path (the path already
#      carries its query string).
#   2. Send the API key in the X-API-Key header and ask for JSON.
#   3. 2xx  → return response.json() unchanged.
#      else → raise UpstreamError with the best message we can find.
#
# ONE FAILURE KIND:
#   Callers only ever need to catch UpstreamError.  HTTP errors, error bodies
#   and connection failures all become an UpstreamError.  A 2xx response
#   with a broken JSON body is NOT converted: that is a server bug and it
#   surfaces as the decoder's ValueError.
#
# WHY A FRESH httpx.AsyncClient PER CALL?
#   Tool invocations run concurrently and must not share mutable state.
#   Opening the client inside `async with` keeps every call self-contained.
# =============================================================================

import logging
from typing import Any, Optional

import httpx

from core.config import API_BASE, Settings

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT_SECONDS = 30.0


class UpstreamError(Exception):
    """The upstream API did not return a successful response."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _error_message(response: httpx.Response) -> str:
    """Pull a human-readable message out of a failed response.

    Preference order:
      1. the "error" field of a JSON error body
      2. "API returned <status>" when the body is JSON without "error"
      3. the HTTP reason phrase when the body is not JSON at all
    """
    try:
        body = response.json()
    except ValueError:
        return response.reason_phrase or f"API returned {response.status_code}"

    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return f"API returned {response.status_code}"


class CatalogClient:
    """Async client for the Books Mandala agent API."""

    def __init__(
        self,
        api_key: str,
        base_url: str = API_BASE,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            api_key: Value sent in the X-API-Key header on every request.
            base_url: API origin plus version prefix, without trailing slash.
            transport: Optional httpx transport (tests pass a MockTransport).
        """
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "CatalogClient":
        return cls(api_key=settings.api_key, base_url=settings.api_base)

    @property
    def headers(self) -> dict[str, str]:
        return {"X-API-Key": self.api_key, "Accept": "application/json"}

    async def fetch_json(self, path: str) -> Any:
        """GET base_url + path and return the decoded JSON body.

        Raises:
            UpstreamError: non-2xx status, or the request never completed.
            ValueError: a 2xx response whose body is not valid JSON.
        """
        url = f"{self.base_url}{path}"
        logger.debug("GET %s", url)

        try:
            async with httpx.AsyncClient(
                transport=self._transport,
                timeout=REQUEST_TIMEOUT_SECONDS,
            ) as client:
                response = await client.get(url, headers=self.headers)
        except httpx.HTTPError as exc:
            logger.warning("Upstream request to %s failed: %s", path, exc)
            raise UpstreamError(f"Upstream request failed: {exc}") from exc

        if not response.is_success:
            message = _error_message(response)
            logger.warning("Upstream %s returned %s: %s",
                           path, response.status_code, message)
            raise UpstreamError(message, status_code=response.status_code)

        return response.json()
