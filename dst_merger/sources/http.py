"""Letter source backed by a static HTTP server.

WHY: The letter library is often published next to a web front end
rather than installed with the tool. Fetching over HTTP lets one library
serve many merger deployments.

HOW: Uses httpx.AsyncClient for non-blocking requests. The source is an
async context manager. Enter it to open the connection pool, exit to
close it. Each letter is a GET of {base_url}/{letter_path}.

RULES:
- Always use the async context manager (async with HttpLetterSource(...) as source:)
- Non-200 responses and transport errors → MissingLetterResource
- No retries; a failed letter fails the word
"""

from __future__ import annotations

import logging

import httpx

from dst_merger.config import DST_HTTP_TIMEOUT
from dst_merger.core.errors import MissingLetterResource
from dst_merger.core.letters import letter_path
from dst_merger.sources.base import BaseLetterSource

logger = logging.getLogger(__name__)


class HttpLetterSource(BaseLetterSource):
    """Fetches letter designs from a web server."""

    def __init__(
        self,
        base_url: str,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout if timeout is not None else DST_HTTP_TIMEOUT
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> HttpLetterSource:
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=httpx.Timeout(self._timeout),
            transport=self._transport,
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        if self._client:
            await self._client.aclose()
            self._client = None

    @property
    def name(self) -> str:
        return "server {}".format(self._base_url)

    def _ensure_client(self) -> httpx.AsyncClient:
        """Return the active httpx client, raising if not in context manager."""
        if self._client is None:
            raise RuntimeError(
                "HttpLetterSource must be used as an async context manager: "
                "async with HttpLetterSource(url) as source: ..."
            )
        return self._client

    async def fetch(self, letter: str, word_length: int) -> bytes:
        client = self._ensure_client()
        path = letter_path(letter, word_length)
        url = "{}/{}".format(self._base_url, path)

        try:
            resp = await client.get("/" + path)
        except httpx.HTTPError as exc:
            raise MissingLetterResource(letter, url, reason=str(exc) or type(exc).__name__) from exc

        if resp.status_code != 200:
            raise MissingLetterResource(
                letter,
                url,
                reason="not found for size {} (HTTP {})".format(word_length, resp.status_code),
            )

        logger.debug("Fetched %s (%d bytes)", url, len(resp.content))
        return resp.content
