"""Use case listing trades whose stock matches a name filter."""

from collections.abc import Callable
from contextlib import closing

import click

from lupo.application.ports.record_store import RecordStorePort
from lupo.domain.services.formatting import format_trade


class ListTradesUseCase:
    """Write every matching trade to a display sink, in file order.

    The first row that fails to decode aborts the listing: rows after it
    are never read and nothing is displayed.
    """

    def __init__(
        self,
        store: RecordStorePort,
        display: Callable[[str], None] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            store: Store providing the trades sequence.
            display: Sink receiving one formatted line per trade.
        """
        self._store = store
        self._display = display or click.echo

    def execute(self, name_substring: str | None = None) -> int:
        """Display the trades whose stock contains ``name_substring``.

        Args:
            name_substring: Case-sensitive substring to match; None or an
                empty string matches every trade.

        Returns:
            int: Number of trades displayed.

        Raises:
            RowDecodeError: On the first row that cannot be decoded.
        """
        needle = name_substring or ""
        lines = []
        with closing(self._store.load_trades()) as rows:
            for row in rows:
                trade = row.unwrap()
                if needle in trade.stock:
                    lines.append(format_trade(trade))
        for line in lines:
            self._display(line)
        return len(lines)


__all__ = ["ListTradesUseCase"]
