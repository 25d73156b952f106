"""Domain services package."""

from .dates import format_date, parse_date
from .fields import parse_number, parse_optional_number
from .formatting import format_number, format_trade

__all__ = [
    "format_date",
    "parse_date",
    "parse_number",
    "parse_optional_number",
    "format_number",
    "format_trade",
]
