"""Error types raised by the moviedb client.

Transport failures (httpx exceptions) are not wrapped; they reach the caller
unchanged.
"""


class MovieDBError(Exception):
    """Base class for all client-side errors."""


class InvalidURLError(MovieDBError):
    """URL composition failed; the caller has to fix the input."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Invalid URL: {path}")
        self.path = path


class DecodeError(MovieDBError):
    """Response body could not be turned into the requested type."""


class EmptyResponseError(DecodeError):
    """Transport returned a response without a body."""


class FailedDecodingError(DecodeError):
    """Body is present but does not match the expected shape."""


class PagingError(MovieDBError):
    """Cursor cannot move in the requested direction."""


class NoNextPageError(PagingError):
    """Raised by Paging.next() on the last page."""


class NoPreviousPageError(PagingError):
    """Raised by Paging.previous() on the first page."""
