"""Decoder for the tab-separated data files.

The dialect shared by both files:

* fields are separated by a horizontal tab;
* rows may hold a different number of fields;
* every field is trimmed before conversion;
* lines whose first non-blank character is ``#`` are comments, and blank
  lines are ignored;
* the first remaining line is the header and is skipped.

``decode_file`` opens the file eagerly and returns a lazy ``DecodedRows``
sequence, one ``DecodedRow`` per data row, in file order. Lines are decoded
from UTF-8 one at a time, so an invalid byte only affects its own row.
"""

import csv
from collections.abc import Generator, Iterable
from pathlib import Path
from typing import BinaryIO, Optional

from lupo.domain.constants import COMMENT_PREFIX, FIELD_DELIMITER
from lupo.domain.errors import (
    FieldFormatError,
    FileOpenError,
    MalformedRowError,
    RowDecodeError,
    TextEncodingError,
)
from lupo.domain.models import DecodedRow, DecodedRows
from lupo.domain.models.schema import RecordT
from lupo.infrastructure.logging.logger import get_app_logger


def decode_file(
    path: Path,
    schema: type[RecordT],
    logger=None,
) -> DecodedRows[RecordT]:
    """Open ``path`` and return a lazy sequence of decoded rows.

    Args:
        path: Data file to read.
        schema: Record type building one record from a row's cells.
        logger: Optional logger compatible with logging.Logger-like API.

    Returns:
        DecodedRows[RecordT]: Single-pass sequence; the file is closed once
        it is exhausted or closed.

    Raises:
        FileOpenError: If the file cannot be opened. Raised immediately,
            before any row is produced.
    """
    logger = logger or get_app_logger()
    try:
        handle = open(path, "rb")
    except OSError as exc:
        raise FileOpenError(path) from exc
    logger.debug(f"Decoding {schema.__name__} records from {path}")
    return DecodedRows(_decode_rows(handle, path, schema), handle)


def _decode_rows(
    handle: BinaryIO,
    path: Path,
    schema: type[RecordT],
) -> Generator[DecodedRow[RecordT], None, None]:
    with handle:
        header_seen = False
        for line_number, raw, encoding_error in _data_lines(handle):
            if not header_seen:
                header_seen = True
                continue
            if encoding_error is not None:
                yield _failed_row(path, line_number, raw, encoding_error)
            else:
                yield _decode_row(path, line_number, raw, schema)


def _data_lines(
    lines: Iterable[bytes],
) -> Generator[tuple[int, str, Optional[TextEncodingError]], None, None]:
    """Yield numbered lines that are neither blank nor comments.

    A line that is not valid UTF-8 is yielded with its undecodable bytes
    replaced, together with the error describing it.
    """
    for line_number, line in enumerate(lines, start=1):
        data = line.rstrip(b"\r\n")
        encoding_error = None
        try:
            raw = data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raw = data.decode("utf-8", errors="replace")
            encoding_error = TextEncodingError(str(exc))
            encoding_error.__cause__ = exc
        stripped = raw.strip()
        if not stripped or stripped.startswith(COMMENT_PREFIX):
            continue
        yield line_number, raw, encoding_error


def split_fields(raw: str) -> list[str]:
    """Split one line into trimmed cells.

    Args:
        raw: Line content without its terminator.

    Returns:
        list[str]: Cells in column order.

    Raises:
        MalformedRowError: If the line cannot be tokenized.
    """
    try:
        reader = csv.reader([raw], delimiter=FIELD_DELIMITER, strict=True)
        cells = next(reader, [])
    except csv.Error as exc:
        raise MalformedRowError(str(exc)) from exc
    return [value.strip() for value in cells]


def _decode_row(
    path: Path,
    line_number: int,
    raw: str,
    schema: type[RecordT],
) -> DecodedRow[RecordT]:
    try:
        record = schema.from_fields(split_fields(raw))
    except FieldFormatError as exc:
        return _failed_row(path, line_number, raw, exc)
    return DecodedRow(line_number=line_number, record=record)


def _failed_row(
    path: Path,
    line_number: int,
    raw: str,
    cause: FieldFormatError,
) -> DecodedRow:
    error = RowDecodeError(path, line_number, raw, cause)
    error.__cause__ = cause
    return DecodedRow(line_number=line_number, error=error)


__all__ = ["decode_file", "split_fields"]
