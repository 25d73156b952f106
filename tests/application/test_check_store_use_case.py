"""Tests for the CheckStoreUseCase."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from lupo.application.use_cases.check_store import (
    CheckStoreResult,
    CheckStoreUseCase,
)
from lupo.domain.errors import NumberFormatError, RowDecodeError
from lupo.domain.models import DecodedRow


def _rows(*items):
    yield from items


def test_execute_counts_and_displays_summary() -> None:
    """Both files should be consumed fully and summarized."""
    store = MagicMock()
    store.load_trades.return_value = _rows(
        DecodedRow(line_number=2, record=object()),
    )
    store.load_stocks.return_value = _rows(
        DecodedRow(line_number=2, record=object()),
        DecodedRow(line_number=4, record=object()),
    )
    display = MagicMock()

    result = CheckStoreUseCase(store, display=display).execute()

    assert result == CheckStoreResult(trades_count=1, stocks_count=2)
    assert [call.args[0] for call in display.call_args_list] == [
        "1 trades processed correctly.",
        "2 stocks processed correctly.",
    ]


def test_execute_aborts_before_loading_stocks_on_trade_error() -> None:
    """A trade error should stop the check before stocks are read."""
    error = RowDecodeError(Path("t.tsv"), 2, "x", NumberFormatError("x"))
    store = MagicMock()
    store.load_trades.return_value = _rows(
        DecodedRow(line_number=2, error=error),
    )
    display = MagicMock()

    with pytest.raises(RowDecodeError):
        CheckStoreUseCase(store, display=display).execute()

    store.load_stocks.assert_not_called()
    display.assert_not_called()
