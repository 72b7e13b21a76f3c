"""
Async HTTP client wrapper with retry logic, used for every call the
resolver makes: watch page, player API and HLS manifest.

Retry policy:
- Retries on network errors: TimeoutException, ConnectError, ReadError,
  WriteError, PoolTimeout, ConnectTimeout.
- Retries on server errors: HTTP 429 (rate-limit), 500, 502, 503, 504.
- Exponential back-off with jitter, capped at 30 s per wait.
- Respects Retry-After header on 429 responses.
- Does NOT retry on 4xx client errors (except 429).

No cookie jar is kept: every resolution is stateless, so the client only
carries default headers between requests.
"""

import asyncio
import logging
import random
from typing import Any

import httpx

from ..config import get_settings

logger = logging.getLogger(__name__)

# Maximum back-off wait time (seconds) between retries
_MAX_BACKOFF = 30.0

# HTTP status codes that trigger an automatic retry
_RETRYABLE_STATUS_CODES = {429, 500, 502, 503, 504}

# All httpx exception types that represent transient network problems
_NETWORK_ERRORS = (
    httpx.TimeoutException,  # base for all timeout variants
    httpx.ConnectError,
    httpx.ReadError,
    httpx.WriteError,
    httpx.PoolTimeout,
    httpx.ConnectTimeout,
    httpx.ReadTimeout,
    httpx.CloseError,
)


class HTTPClient:
    """
    Async HTTP client with retry logic and configurable default headers.
    Wraps httpx.AsyncClient.
    """

    def __init__(
        self,
        timeout: float | None = None,
        max_retries: int | None = None,
        headers: dict[str, str] | None = None,
        follow_redirects: bool = True,
    ):
        settings = get_settings()
        self._timeout = timeout if timeout is not None else settings.request_timeout
        self._max_retries = max_retries if max_retries is not None else settings.max_retries
        self._follow_redirects = follow_redirects
        self._default_headers: dict[str, str] = dict(headers) if headers else {}
        self._client: httpx.AsyncClient | None = None

    # ------------------------------------------------------------------
    # Client lifecycle
    # ------------------------------------------------------------------

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(
                    self._timeout,
                    connect=10.0,
                    read=self._timeout,
                    write=10.0,
                    pool=10.0,
                ),
                follow_redirects=self._follow_redirects,
                headers=self._default_headers,
                http2=True,
                limits=httpx.Limits(
                    max_connections=20,
                    max_keepalive_connections=5,
                    keepalive_expiry=30.0,
                ),
            )
        return self._client

    async def close(self):
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    # ------------------------------------------------------------------
    # Core request with retry
    # ------------------------------------------------------------------

    async def request(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str] | None = None,
        params: dict[str, str] | None = None,
        content: str | bytes | None = None,
        json: Any = None,
        timeout: float | None = None,
    ) -> httpx.Response:
        """
        Make an HTTP request with automatic retries on transient failures.

        Back-off: exponential (2^attempt) + random jitter, capped at 30 s.
        On 429, the Retry-After header is respected if present.
        """
        client = await self._get_client()
        last_error: Exception | None = None

        for attempt in range(self._max_retries + 1):
            try:
                response = await client.request(
                    method,
                    url,
                    headers=headers,
                    params=params,
                    content=content,
                    json=json,
                    timeout=timeout if timeout is not None else httpx.USE_CLIENT_DEFAULT,
                )

                if response.status_code in _RETRYABLE_STATUS_CODES:
                    if attempt < self._max_retries:
                        wait = self._backoff(attempt, response)
                        logger.warning(
                            "HTTP %d from %s %s (attempt %d/%d). Retrying in %.1fs...",
                            response.status_code,
                            method,
                            url,
                            attempt + 1,
                            self._max_retries + 1,
                            wait,
                        )
                        await asyncio.sleep(wait)
                        continue
                    logger.error(
                        "HTTP %d from %s %s after %d attempts, giving up.",
                        response.status_code,
                        method,
                        url,
                        self._max_retries + 1,
                    )

                return response

            except _NETWORK_ERRORS as exc:
                last_error = exc
                if attempt < self._max_retries:
                    wait = self._backoff(attempt)
                    logger.warning(
                        "%s on %s %s (attempt %d/%d). Retrying in %.1fs...",
                        type(exc).__name__,
                        method,
                        url,
                        attempt + 1,
                        self._max_retries + 1,
                        wait,
                    )
                    await asyncio.sleep(wait)
                else:
                    logger.error(
                        "%s on %s %s after %d attempts: %s",
                        type(exc).__name__,
                        method,
                        url,
                        self._max_retries + 1,
                        exc,
                    )

        if last_error is not None:
            raise last_error
        raise httpx.ReadError("All retries exhausted with no response")

    # ------------------------------------------------------------------
    # Back-off calculation
    # ------------------------------------------------------------------

    @staticmethod
    def _backoff(
        attempt: int,
        response: httpx.Response | None = None,
    ) -> float:
        """
        Compute wait time with exponential back-off + jitter, capped.

        If *response* is a 429 with a Retry-After header, that value is
        used as a floor.
        """
        base = min((2**attempt) + random.uniform(0, 1), _MAX_BACKOFF)

        if response is not None and response.status_code == 429:
            retry_after = response.headers.get("Retry-After")
            if retry_after:
                try:
                    ra = float(retry_after)
                    base = max(base, min(ra, _MAX_BACKOFF))
                except ValueError:
                    pass

        return base

    # ------------------------------------------------------------------
    # Convenience methods
    # ------------------------------------------------------------------

    async def get(self, url: str, **kwargs) -> httpx.Response:
        return await self.request("GET", url, **kwargs)

    async def post(self, url: str, **kwargs) -> httpx.Response:
        return await self.request("POST", url, **kwargs)

    async def get_text(self, url: str, **kwargs) -> str:
        """GET request returning response text."""
        response = await self.get(url, **kwargs)
        response.raise_for_status()
        return response.text

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.close()
