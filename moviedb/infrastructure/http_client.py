"""HTTP transport with exponential backoff retry."""

import logging
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

import httpx
from tenacity import (
    retry,
    retry_if_exception,
    stop_after_delay,
    wait_exponential,
)

logger = logging.getLogger(__name__)

RETRYABLE_STATUS_CODES = frozenset({429, 500, 502, 503, 504})


@dataclass(frozen=True)
class RawResponse:
    status: int
    body: bytes | None
    url: str = ""


@runtime_checkable
class Transport(Protocol):
    """Capability the Client needs to talk to the API.

    Timeouts and retries are the transport's business; the Client imposes none.
    """

    async def get(self, url: str) -> RawResponse: ...

    async def aclose(self) -> None: ...


def _is_transient(exc: BaseException) -> bool:
    if isinstance(exc, httpx.HTTPStatusError):
        return exc.response.status_code in RETRYABLE_STATUS_CODES
    return isinstance(exc, httpx.TransportError)


# Retry on transient errors: stop after 60s, exponential backoff (max 10s)
RETRY_CONFIG = {
    "retry": retry_if_exception(_is_transient),
    "stop": stop_after_delay(60),
    "wait": wait_exponential(multiplier=1, max=10),
    "reraise": True,
}


class HttpTransport:
    """Transport backed by one long-lived httpx.AsyncClient."""

    def __init__(
        self,
        timeout: float = 30.0,
        headers: dict[str, str] | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._client = client or httpx.AsyncClient(
            timeout=timeout,
            headers={"Accept": "application/json", **(headers or {})},
        )

    @retry(**RETRY_CONFIG)
    async def get(self, url: str) -> RawResponse:
        response = await self._client.get(url)
        response.raise_for_status()
        logger.debug(f"GET {response.url} -> {response.status_code}")
        return RawResponse(
            status=response.status_code,
            body=response.content or None,
            url=str(response.url),
        )

    async def aclose(self) -> None:
        await self._client.aclose()
