"""Typed, cached client for the movie database REST API."""

import logging
from collections.abc import Mapping, Sequence
from datetime import timedelta
from types import TracebackType
from typing import Self, TypeVar

from moviedb.decoder import decode
from moviedb.infrastructure.cache import DEFAULT_EXPIRY, MemoryCache, ResponseCache
from moviedb.infrastructure.http_client import HttpTransport, RawResponse, Transport
from moviedb.paging import Page, Paging
from moviedb.request_builder import PathComponent, build_url
from moviedb.settings import Settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Client:
    """Request pipeline: build URL -> cache lookup -> GET -> cache write -> decode.

    One instance is shared by every request made with the same credential.
    The owner must release it with aclose(), or use it as an async context
    manager::

        async with Client.from_settings(Settings()) as client:
            movie = await client.fetch("movie", 42, model=Movie)
    """

    def __init__(
        self,
        base_url: str,
        images_base_url: str,
        api_key: str,
        transport: Transport,
        cache: ResponseCache | None = None,
        default_expiry: timedelta = DEFAULT_EXPIRY,
    ) -> None:
        self.base_url = base_url
        self.images_base_url = images_base_url
        self.api_key = api_key
        self.cache = cache
        self.default_expiry = default_expiry
        self._transport = transport
        self._closed = False

    @classmethod
    def from_settings(cls, settings: Settings) -> Self:
        """Build a client with an httpx transport and, if enabled, a memory cache."""
        cache = MemoryCache(max_size=settings.cache_max_size) if settings.cache_enabled else None
        logger.debug(
            f"Creating client for {settings.base_url} "
            f"(cache={'on' if cache is not None else 'off'}, timeout={settings.timeout}s)"
        )
        return cls(
            base_url=settings.base_url,
            images_base_url=settings.images_base_url,
            api_key=settings.api_key,
            transport=HttpTransport(timeout=settings.timeout),
            cache=cache,
            default_expiry=settings.cache_expiry,
        )

    @property
    def closed(self) -> bool:
        return self._closed

    async def get(
        self,
        path: Sequence[PathComponent],
        model: type[T],
        query: Mapping[str, str] | None = None,
        expiry: timedelta | None = None,
    ) -> T:
        """Fetch path and decode the response into model.

        Cached responses are decoded without touching the network. A cached
        response that fails to decode raises and stays cached. expiry defaults
        to the client's default_expiry.

        Raises:
            InvalidURLError: If the URL cannot be composed.
            DecodeError: If the response cannot be decoded into model.
            httpx.HTTPError: Transport failures, unchanged.
        """
        url = build_url(self.base_url, path, query, self.api_key)
        expiry = self.default_expiry if expiry is None else expiry

        if self.cache is not None:
            cached = self.cache.get(url)
            if cached is not None:
                logger.debug(f"Cache hit: {url}")
                return decode(cached, model)

        response = await self._transport.get(url)
        self._store(url, response, expiry)
        return decode(response, model)

    async def get_page(
        self,
        path: Sequence[PathComponent],
        item_model: type[T],
        query: Mapping[str, str] | None = None,
        expiry: timedelta | None = None,
    ) -> Paging[T]:
        """Fetch the first requested page of a collection as a Paging cursor."""
        expiry = self.default_expiry if expiry is None else expiry
        page = await self.get(path, Page[item_model], query=query, expiry=expiry)
        return Paging(
            client=self,
            page=page,
            path=tuple(path),
            item_model=item_model,
            query=dict(query or {}),
            expiry=expiry,
        )

    async def fetch(
        self,
        *path: PathComponent,
        model: type[T],
        query: Mapping[str, str] | None = None,
        expiry: timedelta | None = None,
    ) -> T:
        return await self.get(path, model, query=query, expiry=expiry)

    async def fetch_page(
        self,
        *path: PathComponent,
        item: type[T],
        query: Mapping[str, str] | None = None,
        expiry: timedelta | None = None,
    ) -> Paging[T]:
        return await self.get_page(path, item, query=query, expiry=expiry)

    def _store(self, url: str, response: RawResponse, expiry: timedelta) -> None:
        if self.cache is None:
            return
        try:
            self.cache.set(url, response, expiry)
        except Exception as e:
            # NOTE: no error raising - cache writes are best-effort.
            logger.warning(f"Failed to cache response for {url}: {e}", exc_info=True)

    async def aclose(self) -> None:
        """Release the transport. Errors are logged, never raised."""
        if self._closed:
            return
        self._closed = True
        try:
            await self._transport.aclose()
        except Exception as e:
            logger.error(f"Error shutting down client: {e}", exc_info=True)

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
