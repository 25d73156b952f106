"""Column layout shared by the record schemas."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import ClassVar, Protocol, TypeVar

from lupo.domain.constants import FIELD_DELIMITER
from lupo.domain.errors import MissingColumnError


@dataclass(frozen=True)
class Column:
    """A named column of a data file.

    Attributes:
        name: Header label of the column.
        optional: Whether the cell may be empty or missing from a short row.
    """

    name: str
    optional: bool = False


class RecordSchema(Protocol):
    """Protocol implemented by every record type stored in a data file."""

    COLUMNS: ClassVar[tuple[Column, ...]]

    @classmethod
    def from_fields(cls, fields: Sequence[str]) -> "RecordSchema":
        """Build a record from the trimmed cells of one row."""


RecordT = TypeVar("RecordT", bound=RecordSchema)


def header_line(columns: Sequence[Column]) -> str:
    """Return the tab-separated header for the given columns."""
    return FIELD_DELIMITER.join(column.name for column in columns)


def cell(
    fields: Sequence[str],
    columns: Sequence[Column],
    position: int,
) -> str | None:
    """Return the cell at ``position``, enforcing the column's presence.

    Args:
        fields: Trimmed cells of the row.
        columns: Column layout of the record.
        position: Index of the requested column.

    Returns:
        str | None: Cell content, or None when an optional column is missing.

    Raises:
        MissingColumnError: If a required column is missing from the row.
    """
    if position < len(fields):
        return fields[position]
    column = columns[position]
    if column.optional:
        return None
    raise MissingColumnError(column.name, position + 1)


__all__ = ["Column", "RecordSchema", "RecordT", "header_line", "cell"]
