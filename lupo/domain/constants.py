"""Domain constants for the on-disk store layout."""

TRADES_FILE = "trades.tsv"
STOCKS_FILE = "stocks.tsv"

FIELD_DELIMITER = "\t"
COMMENT_PREFIX = "#"

DATE_FORMAT = "%Y/%m/%d"


__all__ = [
    "TRADES_FILE",
    "STOCKS_FILE",
    "FIELD_DELIMITER",
    "COMMENT_PREFIX",
    "DATE_FORMAT",
]
