"""Base pieces for response schemas.

Host applications declare their entities as ApiModel subclasses and use
ApiDate for every date field, e.g.::

    class Movie(ApiModel):
        title: str
        release_date: ApiDate | None = None
"""

import re
from datetime import date, datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict

DATE_FORMAT = "%Y-%m-%d"
_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")


def parse_api_date(value: Any) -> date:
    """Parse a YYYY-MM-DD string; any other representation is rejected."""
    if not isinstance(value, str) or not _DATE_PATTERN.fullmatch(value):
        raise ValueError(f"date must be a YYYY-MM-DD string, got {value!r}")
    return datetime.strptime(value, DATE_FORMAT).date()


ApiDate = Annotated[date, BeforeValidator(parse_api_date)]


class ApiModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")
