"""Tests for the lexical date parser."""

from datetime import datetime, timezone

import pytest

from lupo.domain.errors import DateFormatError
from lupo.domain.services.dates import format_date, parse_date


def test_parse_date_returns_midnight_utc() -> None:
    """A valid date should map to midnight UTC of that day."""
    parsed = parse_date("2024/02/29")

    assert parsed == datetime(2024, 2, 29, tzinfo=timezone.utc)
    assert parsed.tzinfo is timezone.utc


@pytest.mark.parametrize(
    "text",
    [
        "2024/02/30",
        "2024/13/01",
        "2024-01-15",
        "2024/1/15",
        "24/01/15",
        "2024/01/15 10:00:00",
        "2024/0a/15",
        "\u0662\u0660\u0662\u0664/\u0660\u0661/\u0660\u0662",
        "\uff12\uff10\uff12\uff14/01/02",
        "",
    ],
)
def test_parse_date_rejects_invalid_text(text: str) -> None:
    """Anything but an exact, valid YYYY/MM/DD should be rejected."""
    with pytest.raises(DateFormatError) as excinfo:
        parse_date(text)

    assert excinfo.value.text == text


def test_format_date_uses_slashes() -> None:
    """Dates should be rendered in the data file layout."""
    assert format_date(parse_date("2023/07/04")) == "2023/07/04"
