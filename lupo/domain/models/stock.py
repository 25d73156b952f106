"""Stock metadata records stored in ``stocks.tsv``."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import ClassVar

from lupo.domain.models.schema import Column, cell


@dataclass(frozen=True)
class Stock:
    """Reference entry describing a tradable asset."""

    COLUMNS: ClassVar[tuple[Column, ...]] = (
        Column("Name"),
        Column("Asset"),
        Column("Group"),
        Column("Tags"),
        Column("Riskyness"),
        Column("Ticker"),
        Column("Tradedcurrency"),
        Column("Currencyunderlying"),
    )

    name: str
    asset: str
    group: str
    tags: str
    riskiness: str
    ticker: str
    traded_currency: str
    underlying_currency: str

    @classmethod
    def from_fields(cls, fields: Sequence[str]) -> "Stock":
        """Build a stock from the trimmed cells of one row."""
        values = [cell(fields, cls.COLUMNS, i) for i in range(len(cls.COLUMNS))]
        return cls(*values)


__all__ = ["Stock"]
