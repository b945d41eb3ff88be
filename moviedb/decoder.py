"""Decode raw responses into typed values."""

import logging
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from moviedb.errors import EmptyResponseError, FailedDecodingError
from moviedb.infrastructure.http_client import RawResponse

logger = logging.getLogger(__name__)

T = TypeVar("T")


@lru_cache(maxsize=256)
def _adapter(model: Any) -> TypeAdapter[Any]:
    return TypeAdapter(model)


def decode(raw: RawResponse, model: type[T]) -> T:
    """Parse the JSON body of raw into an instance of model.

    Date fields are expected to be declared with moviedb.models.ApiDate,
    which only accepts YYYY-MM-DD.

    Raises:
        EmptyResponseError: If the response carries no body.
        FailedDecodingError: If the body is not valid JSON for model, or
            decodes to null.
    """
    if not raw.body:
        raise EmptyResponseError(f"Empty response body from {raw.url or 'transport'}")

    try:
        value = _adapter(model).validate_json(raw.body)
    except ValidationError as e:
        logger.error(f"Failed to decode {raw.url} into {_type_name(model)}: {e}")
        raise FailedDecodingError(
            f"Response from {raw.url} does not match {_type_name(model)}"
        ) from e

    if value is None:
        raise FailedDecodingError(f"Response from {raw.url} decoded to null")
    return value


def _type_name(model: Any) -> str:
    return getattr(model, "__name__", repr(model))
