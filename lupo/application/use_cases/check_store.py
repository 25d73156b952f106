"""Use case validating every record of a store."""

from collections.abc import Callable, Iterator
from contextlib import closing
from dataclasses import dataclass

import click

from lupo.application.ports.record_store import RecordStorePort
from lupo.domain.models import DecodedRow


@dataclass(frozen=True)
class CheckStoreResult:
    """Result of a full store validation.

    Attributes:
        trades_count: Number of trades decoded.
        stocks_count: Number of stocks decoded.
    """

    trades_count: int
    stocks_count: int


class CheckStoreUseCase:
    """Decode both data files completely, stopping at the first bad row."""

    def __init__(
        self,
        store: RecordStorePort,
        display: Callable[[str], None] | None = None,
    ) -> None:
        self._store = store
        self._display = display or click.echo

    def execute(self) -> CheckStoreResult:
        """Validate trades then stocks and display both counts.

        Returns:
            CheckStoreResult: Number of records decoded per file.

        Raises:
            RowDecodeError: On the first row that cannot be decoded.
        """
        trades_count = self._count(self._store.load_trades())
        stocks_count = self._count(self._store.load_stocks())
        self._display(f"{trades_count} trades processed correctly.")
        self._display(f"{stocks_count} stocks processed correctly.")
        return CheckStoreResult(
            trades_count=trades_count,
            stocks_count=stocks_count,
        )

    @staticmethod
    def _count(rows: Iterator[DecodedRow]) -> int:
        count = 0
        with closing(rows):
            for row in rows:
                row.unwrap()
                count += 1
        return count


__all__ = ["CheckStoreUseCase", "CheckStoreResult"]
