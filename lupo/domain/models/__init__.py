"""Domain models package."""

from .decoded import DecodedRow, DecodedRows
from .schema import Column, RecordSchema, RecordT, header_line
from .stock import Stock
from .trade import Trade, TradeType

__all__ = [
    "DecodedRow",
    "DecodedRows",
    "Column",
    "RecordSchema",
    "RecordT",
    "header_line",
    "Stock",
    "Trade",
    "TradeType",
]
