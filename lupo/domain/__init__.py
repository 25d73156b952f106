"""Domain package for records, field rules and errors."""

from .constants import STOCKS_FILE, TRADES_FILE
from .errors import (
    DateFormatError,
    DirectoryCreateError,
    DirectoryDeleteError,
    DirectoryNotFoundError,
    FieldFormatError,
    FileCreateError,
    FileOpenError,
    LupoError,
    MissingColumnError,
    NumberFormatError,
    RowDecodeError,
    TradeTypeError,
)
from .models import Column, DecodedRow, Stock, Trade, TradeType, header_line
from .services import format_trade, parse_date, parse_number

__all__ = [
    "STOCKS_FILE",
    "TRADES_FILE",
    "DateFormatError",
    "DirectoryCreateError",
    "DirectoryDeleteError",
    "DirectoryNotFoundError",
    "FieldFormatError",
    "FileCreateError",
    "FileOpenError",
    "LupoError",
    "MissingColumnError",
    "NumberFormatError",
    "RowDecodeError",
    "TradeTypeError",
    "Column",
    "DecodedRow",
    "Stock",
    "Trade",
    "TradeType",
    "header_line",
    "format_trade",
    "parse_date",
    "parse_number",
]
