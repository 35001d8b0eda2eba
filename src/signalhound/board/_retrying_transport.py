"""httpx async transport that retries transient GitHub API failures."""

from __future__ import annotations

import asyncio
import logging
import random

import httpx

_LOG = logging.getLogger(__name__)

RETRYABLE_STATUS_CODES = frozenset({429, 502, 503, 504})
# Request extension marking a request that must not be replayed once it may
# have reached the server.
IDEMPOTENT_EXTENSION = "signalhound.idempotent"


class RetryingTransport(httpx.AsyncBaseTransport):
    """Wraps an httpx async transport with retry on transient failures.

    Requests are sent one at a time by the board manager, so a rate-limit
    response simply delays the retry of that request by its ``Retry-After``.
    Transport errors, 429 and 502/503/504 responses are retried up to
    *max_retries* times with capped exponential backoff plus jitter; the
    last response or error is returned/raised unchanged.

    A request whose ``extensions`` set ``signalhound.idempotent`` to False is
    only retried when it provably never took effect: a connection failure or
    a 429 rejection.
    """

    def __init__(
        self,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        max_retries: int = 3,
        backoff_cap: float = 4.0,
    ) -> None:
        self._transport = transport or httpx.AsyncHTTPTransport()
        self._max_retries = max_retries
        self._backoff_cap = backoff_cap

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        idempotent = request.extensions.get(IDEMPOTENT_EXTENSION, True)
        attempt = 0
        while True:
            try:
                response = await self._transport.handle_async_request(request)
            except httpx.TransportError as exc:
                if attempt >= self._max_retries or not (idempotent or isinstance(exc, httpx.ConnectError)):
                    raise
                _LOG.warning("GitHub request failed (%s), retrying", exc.__class__.__name__)
                await self._sleep_backoff(attempt)
                attempt += 1
                continue

            if response.status_code not in RETRYABLE_STATUS_CODES or attempt >= self._max_retries:
                return response
            if not idempotent and response.status_code != 429:
                _LOG.warning("GitHub responded %d to a non-idempotent request, not retrying", response.status_code)
                return response

            retry_after = self._parse_retry_after(response)
            _LOG.warning("GitHub responded %d, retrying after %.1fs", response.status_code, retry_after)
            await response.aclose()
            if retry_after > 0:
                await asyncio.sleep(retry_after)
            await self._sleep_backoff(attempt)
            attempt += 1

    async def aclose(self) -> None:
        await self._transport.aclose()

    @staticmethod
    def _parse_retry_after(response: httpx.Response) -> float:
        raw = response.headers.get("Retry-After")
        if raw is None:
            return 1.0 if response.status_code == 429 else 0.0
        try:
            return max(0.0, float(raw))
        except ValueError:
            return 1.0

    async def _sleep_backoff(self, attempt: int) -> None:
        seconds = min(self._backoff_cap, float(2**attempt)) + random.uniform(0.0, 0.25)
        _LOG.debug("Backing off %.2fs before attempt %d", seconds, attempt + 2)
        await asyncio.sleep(seconds)
