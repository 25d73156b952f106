"""Tests for the tab-separated decoder."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from lupo.domain.errors import (
    DateFormatError,
    FileOpenError,
    MalformedRowError,
    RowDecodeError,
    TextEncodingError,
    TradeTypeError,
)
from lupo.domain.models import Stock, Trade, TradeType
from lupo.infrastructure.tsv_decoder import decode_file, split_fields

TRADES_HEADER = "Account\tDate\tType\tStock\tUnits\tPrice\tFees\tSplit\tCurrency"


def _write(path: Path, *lines: str) -> Path:
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def test_decode_skips_header_comments_and_blank_lines(tmp_path: Path) -> None:
    """Only data rows should be yielded, in file order."""
    path = _write(
        tmp_path / "trades.tsv",
        "# leading comment",
        "",
        TRADES_HEADER,
        "A\t2024/01/15\tBuy\tAAPL\t10\t150\t1\t1\t1",
        "   # indented comment",
        "   ",
        "A\t2024/01/16\tSell\tMSFT\t-5\t300\t\t1\t1",
        "# trailing comment",
    )

    rows = list(decode_file(path, Trade, logger=MagicMock()))

    assert [row.line_number for row in rows] == [4, 7]
    assert [row.unwrap().stock for row in rows] == ["AAPL", "MSFT"]
    assert rows[1].unwrap().fees is None


def test_decode_trims_every_field(tmp_path: Path) -> None:
    """Whitespace around cells should be removed before parsing."""
    path = _write(
        tmp_path / "trades.tsv",
        TRADES_HEADER,
        " A \t 2024/01/15 \t Div \t AAPL \t 0 \t \t 2.5 \t 1 \t 1 ",
    )

    [row] = decode_file(path, Trade, logger=MagicMock())
    trade = row.unwrap()

    assert trade.account == "A"
    assert trade.type is TradeType.DIVIDEND
    assert trade.price is None
    assert trade.fees == 2.5


def test_decode_reports_row_errors_without_stopping(tmp_path: Path) -> None:
    """A bad row should yield an error at its position only."""
    path = _write(
        tmp_path / "trades.tsv",
        TRADES_HEADER,
        "A\t2024/01/15\tBuy\tAAPL\t10\t150\t1\t1\t1",
        "A\t2024/01/16\tFoo\tAAPL\t10\t150\t1\t1\t1",
        "A\t2024/01/17\tSell\tAAPL\t10\t150\t1\t1\t1",
    )

    rows = list(decode_file(path, Trade, logger=MagicMock()))

    assert [row.ok for row in rows] == [True, False, True]
    error = rows[1].error
    assert isinstance(error, RowDecodeError)
    assert error.line_number == 3
    assert error.raw == "A\t2024/01/16\tFoo\tAAPL\t10\t150\t1\t1\t1"
    assert isinstance(error.cause, TradeTypeError)
    assert error.__cause__ is error.cause
    with pytest.raises(RowDecodeError):
        rows[1].unwrap()


def test_decode_invalid_calendar_date_is_a_date_error(tmp_path: Path) -> None:
    """An impossible date should not be normalized."""
    path = _write(
        tmp_path / "trades.tsv",
        TRADES_HEADER,
        "A\t2024/02/30\tBuy\tAAPL\t10\t150\t1\t1\t1",
    )

    [row] = decode_file(path, Trade, logger=MagicMock())

    assert isinstance(row.error.cause, DateFormatError)


def test_decode_malformed_quoting_is_a_row_error(tmp_path: Path) -> None:
    """A quoted cell followed by stray text cannot be tokenized."""
    path = _write(
        tmp_path / "stocks.tsv",
        "Name\tAsset\tGroup\tTags\tRiskyness\tTicker\tTraded\tUnderlying",
        '"Apple"x\tEquity\tTech\t\tHigh\tAAPL\tUSD\tUSD',
    )

    [row] = decode_file(path, Stock, logger=MagicMock())

    assert isinstance(row.error.cause, MalformedRowError)


def test_decode_missing_file_fails_immediately(tmp_path: Path) -> None:
    """FileOpenError should be raised when the sequence is requested."""
    missing = tmp_path / "missing.tsv"

    with pytest.raises(FileOpenError) as excinfo:
        decode_file(missing, Trade, logger=MagicMock())

    assert excinfo.value.path == missing
    assert isinstance(excinfo.value.__cause__, OSError)


def test_decode_is_lazy(tmp_path: Path) -> None:
    """Rows should be decoded one at a time as they are consumed."""
    path = _write(
        tmp_path / "trades.tsv",
        TRADES_HEADER,
        "A\t2024/01/15\tBuy\tAAPL\t10\t150\t1\t1\t1",
        "A\t2024/01/16\tBuy\tAAPL\t10\t150\t1\t1\t1",
    )

    rows = decode_file(path, Trade, logger=MagicMock())
    first = next(rows)
    rows.close()

    assert first.line_number == 2
    with pytest.raises(StopIteration):
        next(rows)


def test_decode_header_only_file_is_empty(tmp_path: Path) -> None:
    """A file holding only its header should yield nothing."""
    path = _write(tmp_path / "trades.tsv", TRADES_HEADER)

    assert list(decode_file(path, Trade, logger=MagicMock())) == []


def test_split_fields_trims_and_keeps_empty_cells() -> None:
    """Empty cells should be preserved as empty strings."""
    assert split_fields(" a \t\t b ") == ["a", "", "b"]


def test_decode_invalid_utf8_only_affects_its_row(tmp_path: Path) -> None:
    """Rows around an undecodable byte should still decode."""
    path = tmp_path / "trades.tsv"
    path.write_bytes(
        TRADES_HEADER.encode("utf-8")
        + b"\nA\t2024/01/15\tBuy\tAAPL\t10\t150\t1\t1\t1"
        + b"\nA\t2024/01/16\tBuy\tAA\xffPL\t10\t150\t1\t1\t1"
        + b"\nA\t2024/01/17\tSell\tAAPL\t-1\t150\t1\t1\t1\n"
    )

    rows = list(decode_file(path, Trade, logger=MagicMock()))

    assert [row.ok for row in rows] == [True, False, True]
    error = rows[1].error
    assert error.line_number == 3
    assert isinstance(error.cause, TextEncodingError)
    assert isinstance(error.cause.__cause__, UnicodeDecodeError)
    assert "\ufffd" in error.raw


def test_decode_close_before_iteration_releases_file(tmp_path: Path) -> None:
    """Closing an unstarted sequence should close the file at once."""
    path = _write(tmp_path / "trades.tsv", TRADES_HEADER)

    rows = decode_file(path, Trade, logger=MagicMock())
    assert not rows.closed
    rows.close()

    assert rows.closed
    with pytest.raises(StopIteration):
        next(rows)


def test_decode_sequence_is_a_context_manager(tmp_path: Path) -> None:
    """Leaving a with block should release the file."""
    path = _write(
        tmp_path / "trades.tsv",
        TRADES_HEADER,
        "A\t2024/01/15\tBuy\tAAPL\t10\t150\t1\t1\t1",
    )

    with decode_file(path, Trade, logger=MagicMock()) as rows:
        first = next(rows)

    assert first.ok
    assert rows.closed
