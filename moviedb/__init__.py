"""Typed, cached, paginated client for the movie database REST API.

Example:
    async with Client.from_settings(Settings()) as client:
        paging = await client.fetch_page("movie", "popular", item=Movie)
        async for movie in paging:
            ...
"""

from moviedb.client import Client
from moviedb.decoder import decode
from moviedb.errors import (
    DecodeError,
    EmptyResponseError,
    FailedDecodingError,
    InvalidURLError,
    MovieDBError,
    NoNextPageError,
    NoPreviousPageError,
    PagingError,
)
from moviedb.infrastructure import (
    DEFAULT_EXPIRY,
    HttpTransport,
    MemoryCache,
    RawResponse,
    ResponseCache,
    Transport,
)
from moviedb.models import ApiDate, ApiModel
from moviedb.paging import Page, Paging
from moviedb.request_builder import PathComponent, build_url
from moviedb.settings import Settings

__all__ = [
    "ApiDate",
    "ApiModel",
    "Client",
    "DEFAULT_EXPIRY",
    "DecodeError",
    "EmptyResponseError",
    "FailedDecodingError",
    "HttpTransport",
    "InvalidURLError",
    "MemoryCache",
    "MovieDBError",
    "NoNextPageError",
    "NoPreviousPageError",
    "Page",
    "PagingError",
    "Paging",
    "PathComponent",
    "RawResponse",
    "ResponseCache",
    "Settings",
    "Transport",
    "build_url",
    "decode",
]
