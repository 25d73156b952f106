"""Per-row outcome of decoding a data file."""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar

from lupo.domain.errors import RowDecodeError

T = TypeVar("T")


class _Closable(Protocol):
    closed: bool

    def close(self) -> None:
        """Release the underlying resource."""


@dataclass(frozen=True)
class DecodedRow(Generic[T]):
    """Either a decoded record or the error that prevented decoding it.

    Attributes:
        line_number: 1-based physical line number of the row.
        record: Decoded record, None when decoding failed.
        error: Decoding error, None when decoding succeeded.
    """

    line_number: int
    record: T | None = None
    error: RowDecodeError | None = None

    @property
    def ok(self) -> bool:
        """Return True when the row decoded successfully."""
        return self.error is None

    def unwrap(self) -> T:
        """Return the record, raising the row error if decoding failed.

        Raises:
            RowDecodeError: If the row could not be decoded.
        """
        if self.error is not None:
            raise self.error
        return self.record


class DecodedRows(Generic[T]):
    """Single-pass sequence of decoded rows bound to an open resource.

    Closing the sequence releases the resource, whether or not iteration
    has started.
    """

    def __init__(self, rows: Iterator[DecodedRow[T]], resource: _Closable):
        self._rows = rows
        self._resource = resource

    def __iter__(self) -> "DecodedRows[T]":
        return self

    def __next__(self) -> DecodedRow[T]:
        return next(self._rows)

    @property
    def closed(self) -> bool:
        """Return True once the underlying resource is released."""
        return self._resource.closed

    def close(self) -> None:
        """Stop the sequence and release the underlying resource."""
        close_rows = getattr(self._rows, "close", None)
        if callable(close_rows):
            close_rows()
        self._resource.close()

    def __enter__(self) -> "DecodedRows[T]":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


__all__ = ["DecodedRow", "DecodedRows"]
