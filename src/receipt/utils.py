"""Utility helpers shared across receipt modules."""

from __future__ import annotations

from decimal import ROUND_CEILING, ROUND_HALF_UP, Decimal, InvalidOperation
from pathlib import Path

from .errors import NumericError

CENT = Decimal("0.01")


def parse_decimal(text: str) -> Decimal:
    """Convert ``text`` to :class:`~decimal.Decimal`.

    Unlike a lenient conversion, empty or malformed values raise
    :class:`~receipt.errors.NumericError` so that a bad price aborts the
    whole basket.
    """

    text = text.strip()
    try:
        result = Decimal(text)
    except InvalidOperation as exc:
        raise NumericError(f"Invalid numeric value: {text!r}") from exc
    if not result.is_finite():
        raise NumericError(f"Invalid numeric value: {text!r}")
    return result


def parse_quantity(text: str) -> int:
    """Convert ``text`` to an integer quantity."""

    try:
        return int(text)
    except ValueError as exc:
        # int() also refuses strings past the interpreter's digit limit.
        raise NumericError(f"Invalid quantity: {text[:20]!r}") from exc


def round_up_to_increment(amount: Decimal, increment: Decimal) -> Decimal:
    """Round ``amount`` up to the next multiple of ``increment``.

    The result is quantised to cents; ``round_up_to_increment(Decimal("0.5625"),
    Decimal("0.05"))`` returns ``Decimal("0.60")``.
    """

    steps = (amount / increment).to_integral_value(rounding=ROUND_CEILING)
    return quantize_cents(steps * increment)


def quantize_cents(amount: Decimal) -> Decimal:
    """Round ``amount`` half-up to two decimal places."""

    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def format_amount(amount: Decimal) -> str:
    """Format ``amount`` with exactly two decimal digits."""

    return f"{quantize_cents(amount):.2f}"


def read_text_with_fallback(path: Path) -> tuple[str, str]:
    """Decode ``path`` as UTF-8, falling back to cp1252 and then latin-1.

    Returns the text together with the encoding that decoded it. latin-1
    maps every byte, so the last fallback always succeeds.
    """

    data = path.read_bytes()
    for encoding in ("utf-8", "cp1252"):
        try:
            return data.decode(encoding), encoding
        except UnicodeDecodeError:
            continue
    return data.decode("latin-1"), "latin-1"


__all__ = [
    "CENT",
    "format_amount",
    "parse_decimal",
    "parse_quantity",
    "quantize_cents",
    "read_text_with_fallback",
    "round_up_to_increment",
]
