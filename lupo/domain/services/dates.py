"""Lexical date parsing for data files."""

import re
from datetime import datetime, timezone

from lupo.domain.constants import DATE_FORMAT
from lupo.domain.errors import DateFormatError

_DATE_PATTERN = re.compile(r"[0-9]{4}/[0-9]{2}/[0-9]{2}")
_MIDNIGHT_SUFFIX = " 00:00:00"
_DATETIME_FORMAT = f"{DATE_FORMAT} %H:%M:%S"


def parse_date(text: str) -> datetime:
    """Parse a ``YYYY/MM/DD`` string into midnight UTC of that day.

    Args:
        text: Date cell content, already trimmed.

    Returns:
        datetime: Timezone-aware timestamp at 00:00:00 UTC.

    Raises:
        DateFormatError: If the text is not a valid calendar date in the
            expected layout.
    """
    # strptime alone accepts single-digit months and days.
    if not _DATE_PATTERN.fullmatch(text):
        raise DateFormatError(text)
    try:
        parsed = datetime.strptime(text + _MIDNIGHT_SUFFIX, _DATETIME_FORMAT)
    except ValueError as exc:
        raise DateFormatError(text) from exc
    return parsed.replace(tzinfo=timezone.utc)


def format_date(value: datetime) -> str:
    """Render a timestamp using the data file date layout."""
    return value.strftime(DATE_FORMAT)


__all__ = ["parse_date", "format_date"]
