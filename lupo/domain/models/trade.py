"""Trade records stored in ``trades.tsv``."""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import ClassVar

from lupo.domain.errors import TradeTypeError
from lupo.domain.models.schema import Column, cell
from lupo.domain.services.dates import parse_date
from lupo.domain.services.fields import parse_number, parse_optional_number


class TradeType(Enum):
    """Kind of ledger event, keyed by its tag in the data file."""

    BUY = "Buy"
    SELL = "Sell"
    TRANSFER_IN = "TrIn"
    DIVIDEND = "Div"
    TRANSFER_OUT = "TrOut"
    SPLIT = "Split"

    @classmethod
    def from_tag(cls, tag: str) -> "TradeType":
        """Return the member for a case-sensitive tag.

        Raises:
            TradeTypeError: If the tag is not one of the known values.
        """
        try:
            return cls(tag)
        except ValueError as exc:
            raise TradeTypeError(tag) from exc


@dataclass(frozen=True)
class Trade:
    """One ledger event.

    Attributes:
        account: Free-text account identifier.
        date: Trade day at midnight UTC.
        type: Kind of event.
        stock: Ticker or name of the traded asset.
        units: Signed number of units.
        price: Unit price, None for events without a price.
        fees: Fees paid, None when not recorded.
        split: Split ratio.
        currency: FX rate or amount, depending on the ledger convention.
    """

    COLUMNS: ClassVar[tuple[Column, ...]] = (
        Column("Account"),
        Column("Date"),
        Column("Type"),
        Column("Stock"),
        Column("Units"),
        Column("Price", optional=True),
        Column("Fees", optional=True),
        Column("Split"),
        Column("Currency"),
    )

    account: str
    date: datetime
    type: TradeType
    stock: str
    units: float
    price: float | None
    fees: float | None
    split: float
    currency: float

    @classmethod
    def from_fields(cls, fields: Sequence[str]) -> "Trade":
        """Build a trade from the trimmed cells of one row.

        Raises:
            FieldFormatError: If any cell fails its field rule.
        """
        columns = cls.COLUMNS
        return cls(
            account=cell(fields, columns, 0),
            date=parse_date(cell(fields, columns, 1)),
            type=TradeType.from_tag(cell(fields, columns, 2)),
            stock=cell(fields, columns, 3),
            units=parse_number(cell(fields, columns, 4)),
            price=parse_optional_number(cell(fields, columns, 5)),
            fees=parse_optional_number(cell(fields, columns, 6)),
            split=parse_number(cell(fields, columns, 7)),
            currency=parse_number(cell(fields, columns, 8)),
        )


__all__ = ["Trade", "TradeType"]
