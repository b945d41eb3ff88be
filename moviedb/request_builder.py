"""URL composition for API requests."""

from collections.abc import Mapping, Sequence
from urllib.parse import quote

import httpx

from moviedb.errors import InvalidURLError

API_KEY_PARAM = "api_key"

# Segments that URL normalisation would collapse into a different path
DOT_SEGMENTS = frozenset({".", ".."})

PathComponent = str | int


def join_path(base_path: str, path: Sequence[PathComponent]) -> str:
    """Append escaped path segments to base_path, in order.

    Each component becomes exactly one segment: "/" is escaped, while empty
    and dot segments are rejected.
    """
    segments = [str(component) for component in path]
    joined = "/".join([base_path.rstrip("/"), *(quote(s, safe="") for s in segments)])
    if any(not segment or segment in DOT_SEGMENTS for segment in segments):
        raise InvalidURLError(joined)
    return joined


def build_url(
    base: str,
    path: Sequence[PathComponent],
    query: Mapping[str, str] | None,
    api_key: str,
) -> str:
    """Compose the full request URL.

    Caller parameters are emitted in sorted key order so equal mappings give
    identical URLs (and cache keys). Any caller-supplied api_key is dropped;
    the credential is always the last parameter.

    Raises:
        InvalidURLError: If base is not an absolute URL without query or
            fragment, a path component is empty or a dot segment, or the
            query string cannot be attached.
    """
    composed = join_path(base, path)

    try:
        base_url = httpx.URL(base)
    except (httpx.InvalidURL, TypeError, ValueError) as e:
        raise InvalidURLError(composed) from e

    if not base_url.scheme or not base_url.host:
        raise InvalidURLError(composed)
    if base_url.query or base_url.fragment:
        raise InvalidURLError(composed)

    params = [
        (key, str(value))
        for key, value in sorted((query or {}).items())
        if key != API_KEY_PARAM
    ]
    params.append((API_KEY_PARAM, api_key))

    try:
        url = base_url.copy_with(path=join_path(base_url.path, path) if path else base_url.path)
        return str(url.copy_with(params=httpx.QueryParams(params)))
    except (httpx.InvalidURL, TypeError, ValueError) as e:
        raise InvalidURLError(composed) from e
