"""Tests for the trade display formatting."""

from lupo.domain.models import Trade
from lupo.domain.services.formatting import format_number, format_trade


def test_format_number_drops_integral_fraction() -> None:
    """Integral values should print without a fractional part."""
    assert format_number(10.0) == "10"
    assert format_number(-3.0) == "-3"
    assert format_number(12.5) == "12.5"
    assert format_number(0.1) == "0.1"


def test_format_number_never_uses_exponent_form() -> None:
    """Small and large values should print positionally."""
    assert format_number(1e-05) == "0.00001"
    assert format_number(-2.5e-07) == "-0.00000025"
    assert format_number(1e20) == "100000000000000000000"


def test_format_number_keeps_negative_zero_sign() -> None:
    """Negative zero should keep its sign."""
    assert format_number(-0.0) == "-0"
    assert format_number(0.0) == "0"


def test_format_trade_pads_date_and_type() -> None:
    """Date and type are fixed-width columns, the rest is concatenated."""
    trade = Trade.from_fields(
        ["Broker", "2024/01/15", "Buy", "AAPL", "10", "150.5", "1.25", "1", "1"]
    )

    assert format_trade(trade) == "2024/01/15  Buy     10AAPL150.51.25"


def test_format_trade_uses_zero_for_absent_values() -> None:
    """Absent price and fees should display as zero."""
    trade = Trade.from_fields(
        ["Broker", "2024/03/01", "TrIn", "MSFT", "5", "", "12.5", "1", "1"]
    )

    assert trade.price is None
    assert format_trade(trade) == "2024/03/01  TrIn    5MSFT012.5"
