"""Pytest configuration and shared fixtures."""

import pytest

from moviedb import Client, MemoryCache
from tests.helpers import API_KEY, BASE_URL, IMAGES_BASE_URL, FakeClock, FakeTransport, json_response

MOVIE_PAYLOAD = {"title": "X", "release_date": "1999-03-12"}


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(clock: FakeClock) -> MemoryCache:
    return MemoryCache(clock=clock)


@pytest.fixture
def transport() -> FakeTransport:
    """Transport answering every URL with the sample movie payload."""
    return FakeTransport(lambda url: json_response(MOVIE_PAYLOAD, url=url))


@pytest.fixture
def client(transport: FakeTransport, cache: MemoryCache) -> Client:
    return Client(
        base_url=BASE_URL,
        images_base_url=IMAGES_BASE_URL,
        api_key=API_KEY,
        transport=transport,
        cache=cache,
    )


@pytest.fixture
def uncached_client(transport: FakeTransport) -> Client:
    return Client(
        base_url=BASE_URL,
        images_base_url=IMAGES_BASE_URL,
        api_key=API_KEY,
        transport=transport,
    )


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep developer MOVIEDB_* variables out of settings tests."""
    for name in (
        "MOVIEDB_API_KEY",
        "MOVIEDB_BASE_URL",
        "MOVIEDB_IMAGES_BASE_URL",
        "MOVIEDB_CACHE_ENABLED",
        "MOVIEDB_CACHE_EXPIRY",
        "MOVIEDB_CACHE_MAX_SIZE",
        "MOVIEDB_TIMEOUT",
        "DEBUG_MODULES",
    ):
        monkeypatch.delenv(name, raising=False)
