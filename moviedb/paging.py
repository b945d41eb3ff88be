"""Paged collections and the lazy cursor over them."""

from collections.abc import AsyncIterator, Mapping
from dataclasses import dataclass, field
from datetime import timedelta
from typing import TYPE_CHECKING, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from moviedb.errors import NoNextPageError, NoPreviousPageError
from moviedb.infrastructure.cache import DEFAULT_EXPIRY
from moviedb.request_builder import PathComponent

if TYPE_CHECKING:
    from moviedb.client import Client

T = TypeVar("T")

PAGE_PARAM = "page"


class Page(BaseModel, Generic[T]):
    """One page of a collection as returned by the API.

    Pagination links are page numbers: the page after ``page`` exists while
    ``page < total_pages``.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    page: int = 1
    results: tuple[T, ...] = ()
    total_pages: int = Field(default=1, ge=0)
    total_results: int | None = None

    @property
    def next_page(self) -> int | None:
        return self.page + 1 if self.page < self.total_pages else None

    @property
    def previous_page(self) -> int | None:
        return self.page - 1 if self.page > 1 else None


@dataclass(frozen=True)
class Paging(Generic[T]):
    """Immutable cursor over a paged collection.

    Moving forward or backward fetches through the owning Client (and its
    cache) and returns a new Paging; the current instance never changes, so
    several tasks can walk from the same starting page independently.
    """

    client: "Client"
    page: Page[T]
    path: tuple[PathComponent, ...]
    item_model: type[T]
    query: Mapping[str, str] = field(default_factory=dict)
    expiry: timedelta = DEFAULT_EXPIRY

    @property
    def items(self) -> tuple[T, ...]:
        return self.page.results

    @property
    def has_next(self) -> bool:
        return self.page.next_page is not None

    @property
    def has_previous(self) -> bool:
        return self.page.previous_page is not None

    async def next(self) -> "Paging[T]":
        next_page = self.page.next_page
        if next_page is None:
            raise NoNextPageError(
                f"Page {self.page.page} of {self.page.total_pages} is the last page"
            )
        return await self._fetch(next_page)

    async def previous(self) -> "Paging[T]":
        previous_page = self.page.previous_page
        if previous_page is None:
            raise NoPreviousPageError(f"Page {self.page.page} is the first page")
        return await self._fetch(previous_page)

    async def collect(self) -> list[T]:
        """Fetch every remaining page and return all items from this page on."""
        return [item async for item in self]

    async def _fetch(self, page_number: int) -> "Paging[T]":
        query = {**self.query, PAGE_PARAM: str(page_number)}
        return await self.client.get_page(
            self.path, self.item_model, query=query, expiry=self.expiry
        )

    async def __aiter__(self) -> AsyncIterator[T]:
        current: Paging[T] = self
        while True:
            for item in current.items:
                yield item
            if not current.has_next:
                return
            current = await current.next()
