from __future__ import annotations

from decimal import Decimal
from pathlib import Path

import pytest

from receipt.errors import NumericError
from receipt.utils import (
    format_amount,
    parse_decimal,
    parse_quantity,
    read_text_with_fallback,
    round_up_to_increment,
)


def test_parse_decimal_keeps_exact_value() -> None:
    assert parse_decimal(" 27.99 ") == Decimal("27.99")


@pytest.mark.parametrize("text", ["", "abc", "NaN", "Infinity"])
def test_parse_decimal_rejects_invalid_text(text: str) -> None:
    with pytest.raises(NumericError):
        parse_decimal(text)


def test_parse_quantity_rejects_non_integer() -> None:
    assert parse_quantity("3") == 3
    with pytest.raises(NumericError):
        parse_quantity("3.5")


def test_round_up_to_increment() -> None:
    assert round_up_to_increment(Decimal("0.5625"), Decimal("0.05")) == Decimal("0.60")
    assert round_up_to_increment(Decimal("1.00"), Decimal("0.05")) == Decimal("1.00")


def test_format_amount_pads_to_two_decimals() -> None:
    assert format_amount(Decimal("7.9")) == "7.90"


@pytest.mark.parametrize(
    ("payload", "encoding", "expected"),
    [
        ("crème".encode("utf-8"), "utf-8", "crème"),
        ("crème".encode("cp1252"), "cp1252", "crème"),
        (b"caf\x81", "latin-1", "caf\x81"),
    ],
)
def test_read_text_with_fallback(
    tmp_path: Path, payload: bytes, encoding: str, expected: str
) -> None:
    path = tmp_path / "basket.txt"
    path.write_bytes(payload)

    assert read_text_with_fallback(path) == (expected, encoding)
