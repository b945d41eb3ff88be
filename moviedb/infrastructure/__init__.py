"""Infrastructure layer providing reusable components.

This module contains the pluggable collaborators used by the Client:
- HTTP transport with retry logic
- In-memory response cache with expiry
"""

from moviedb.infrastructure.cache import DEFAULT_EXPIRY, MemoryCache, ResponseCache
from moviedb.infrastructure.http_client import HttpTransport, RawResponse, Transport

__all__ = [
    "DEFAULT_EXPIRY",
    "HttpTransport",
    "MemoryCache",
    "RawResponse",
    "ResponseCache",
    "Transport",
]
