"""Port for reading records from a data store."""

from typing import Protocol

from lupo.domain.models import DecodedRows, Stock, Trade


class RecordStorePort(Protocol):
    """Port exposing lazy, single-pass access to the stored records."""

    def load_trades(self) -> DecodedRows[Trade]:
        """Return the decoded rows of the trades file, in file order."""

    def load_stocks(self) -> DecodedRows[Stock]:
        """Return the decoded rows of the stocks file, in file order."""


__all__ = ["RecordStorePort"]
