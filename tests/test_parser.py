from __future__ import annotations

from decimal import Decimal

import pytest

from receipt.errors import NumericError, ParseError
from receipt.parser import iter_line_items, parse_line


def test_parse_line_extracts_fields() -> None:
    item = parse_line("1 imported bottle of perfume at 27.99")

    assert item.quantity == 1
    assert item.description == "imported bottle of perfume"
    assert item.unit_price == Decimal("27.99")


def test_parse_line_trims_description() -> None:
    item = parse_line("2 box of chocolates   at 1.50\n")

    assert item.quantity == 2
    assert item.description == "box of chocolates"
    assert item.unit_price == Decimal("1.50")


def test_parse_line_ignores_text_after_price() -> None:
    item = parse_line("2 widget at 5.00 extra junk")

    assert item.description == "widget"
    assert item.unit_price == Decimal("5.00")


def test_parse_line_splits_on_last_at_token() -> None:
    item = parse_line("1 book at home at 12.49")

    assert item.description == "book at home"
    assert item.unit_price == Decimal("12.49")


@pytest.mark.parametrize(
    "line",
    [
        "2 widget 5.00",
        "widget at 5.00",
        "2 widget at 5",
        "2 widget at .50",
        " 2 widget at 5.00",
        "",
    ],
)
def test_parse_line_rejects_malformed_lines(line: str) -> None:
    with pytest.raises(ParseError) as exc:
        parse_line(line, line_number=7)

    assert exc.value.line == line
    assert exc.value.line_number == 7
    assert "line 7" in str(exc.value)


def test_parse_line_rejects_zero_quantity() -> None:
    with pytest.raises(NumericError):
        parse_line("0 widget at 5.00")


def test_iter_line_items_skips_blank_lines_and_keeps_order() -> None:
    lines = ["1 book at 12.49", "", "   ", "2 music CD at 14.99", ""]

    items = list(iter_line_items(lines))

    assert [item.description for item in items] == ["book", "music CD"]


def test_iter_line_items_reports_line_number_of_failure() -> None:
    lines = ["1 book at 12.49", "", "2 widget 5.00", "1 chocolate bar at 0.85"]

    with pytest.raises(ParseError) as exc:
        list(iter_line_items(lines))

    assert exc.value.line_number == 3


@pytest.mark.parametrize(
    "line",
    [
        "1000000000000000000000000000 music CD at 1.00",
        "1 music CD at 123456789012345678901234567.99",
        "1000000000 music CD at 1.00",
        "1 music CD at 1000000000000.00",
    ],
)
def test_parse_line_rejects_oversized_amounts(line: str) -> None:
    with pytest.raises(NumericError):
        parse_line(line)


def test_parse_line_accepts_largest_amounts() -> None:
    item = parse_line("999999999 music CD at 999999999999.99")

    assert item.total_price == Decimal("1099999998899990000000.01")
