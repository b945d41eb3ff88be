"""Fakes shared by the test modules."""

import asyncio
import json
from collections.abc import Callable, Sequence
from typing import Any

import httpx

from moviedb import ApiDate, ApiModel, RawResponse

BASE_URL = "https://api.example.com"
IMAGES_BASE_URL = "https://images.example.com"
API_KEY = "KEY"


class Movie(ApiModel):
    title: str
    release_date: ApiDate | None = None


def json_response(payload: Any, url: str = "", status: int = 200) -> RawResponse:
    return RawResponse(status=status, body=json.dumps(payload).encode(), url=url)


class FakeTransport:
    """Records every GET and answers through handler(url)."""

    def __init__(self, handler: Callable[[str], RawResponse]):
        self.handler = handler
        self.calls: list[str] = []
        self.close_calls = 0

    async def get(self, url: str) -> RawResponse:
        self.calls.append(url)
        await asyncio.sleep(0)
        return self.handler(url)

    async def aclose(self) -> None:
        self.close_calls += 1


class FakeClock:
    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def paged_handler(items: Sequence[dict[str, Any]], page_size: int) -> Callable[[str], RawResponse]:
    """Serve items as TMDB-style pages selected by the page query parameter."""
    total_pages = max(1, -(-len(items) // page_size))

    def handler(url: str) -> RawResponse:
        page = int(httpx.URL(url).params.get("page", "1"))
        start = (page - 1) * page_size
        return json_response(
            {
                "page": page,
                "results": list(items[start : start + page_size]),
                "total_pages": total_pages,
                "total_results": len(items),
            },
            url=url,
        )

    return handler
