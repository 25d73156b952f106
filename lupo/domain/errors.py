"""Error hierarchy for the lupo store.

Field-level parsers raise ``FieldFormatError`` subclasses. The decoder wraps
them into a ``RowDecodeError`` carrying the row position, so callers only
need to handle the store-level errors.
"""

from pathlib import Path


class LupoError(Exception):
    """Base class for every error raised by the store."""


class DirectoryNotFoundError(LupoError):
    """The store directory does not exist or is not a directory."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Data directory not found: {path}")
        self.path = path


class DirectoryCreateError(LupoError):
    """The store directory could not be created."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Cannot create data directory: {path}")
        self.path = path


class DirectoryDeleteError(LupoError):
    """The store directory could not be removed before re-initialization."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Cannot delete data directory: {path}")
        self.path = path


class FileCreateError(LupoError):
    """A data file could not be created with its header."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Cannot create data file: {path}")
        self.path = path


class FileOpenError(LupoError):
    """A data file could not be opened for reading."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Cannot open data file: {path}")
        self.path = path


class FieldFormatError(LupoError, ValueError):
    """A single cell could not be converted to its field type."""


class DateFormatError(FieldFormatError):
    """A cell is not a valid YYYY/MM/DD calendar date."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Invalid date '{text}', expected YYYY/MM/DD")
        self.text = text


class NumberFormatError(FieldFormatError):
    """A cell is not a valid decimal literal."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Invalid number '{text}'")
        self.text = text


class TradeTypeError(FieldFormatError):
    """A cell does not name one of the known trade types."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Unknown trade type '{text}'")
        self.text = text


class MissingColumnError(FieldFormatError):
    """A row is too short to hold a required column."""

    def __init__(self, column: str, position: int) -> None:
        super().__init__(
            f"Missing required column '{column}' at position {position}"
        )
        self.column = column
        self.position = position


class MalformedRowError(FieldFormatError):
    """A row cannot be split into cells, e.g. because of a stray quote."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Malformed row: {reason}")
        self.reason = reason


class TextEncodingError(FieldFormatError):
    """A line is not valid UTF-8 text."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Invalid UTF-8 text: {reason}")
        self.reason = reason


class RowDecodeError(LupoError):
    """A data row could not be decoded into a record.

    Attributes:
        path: File the row was read from.
        line_number: 1-based physical line number of the row.
        raw: Raw text of the row, without the line terminator.
        cause: Field-level error that made the row invalid.
    """

    def __init__(
        self,
        path: Path,
        line_number: int,
        raw: str,
        cause: FieldFormatError,
    ) -> None:
        super().__init__(
            f"Invalid record at {path}:{line_number}: {cause} (row: {raw!r})"
        )
        self.path = path
        self.line_number = line_number
        self.raw = raw
        self.cause = cause


__all__ = [
    "LupoError",
    "DirectoryNotFoundError",
    "DirectoryCreateError",
    "DirectoryDeleteError",
    "FileCreateError",
    "FileOpenError",
    "FieldFormatError",
    "DateFormatError",
    "NumberFormatError",
    "TradeTypeError",
    "MissingColumnError",
    "MalformedRowError",
    "TextEncodingError",
    "RowDecodeError",
]
