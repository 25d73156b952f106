"""Display formatting for decoded records."""

from __future__ import annotations

from decimal import Decimal
import math
from typing import TYPE_CHECKING

from lupo.domain.services.dates import format_date

if TYPE_CHECKING:
    from lupo.domain.models.trade import Trade

DATE_WIDTH = 12
TYPE_WIDTH = 8


def format_number(value: float) -> str:
    """Render a float in plain positional notation.

    Args:
        value: Number to render.

    Returns:
        str: ``10`` for 10.0, ``-0`` for -0.0, ``0.00001`` for 1e-05; the
        shortest round-trip digits otherwise, never in exponent form.
    """
    if value.is_integer():
        if value == 0 and math.copysign(1.0, value) < 0:
            return "-0"
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def format_trade(trade: Trade) -> str:
    """Render a trade as a single display line.

    Columns are concatenated without separators: the date and the type tag
    are left-justified to fixed widths, the remaining values are unpadded.
    Absent price and fees are shown as zero.
    """
    price = trade.price if trade.price is not None else 0.0
    fees = trade.fees if trade.fees is not None else 0.0
    return (
        f"{format_date(trade.date):<{DATE_WIDTH}}"
        f"{trade.type.value:<{TYPE_WIDTH}}"
        f"{format_number(trade.units)}"
        f"{trade.stock}"
        f"{format_number(price)}"
        f"{format_number(fees)}"
    )


__all__ = ["format_number", "format_trade", "DATE_WIDTH", "TYPE_WIDTH"]
