"""Basket aggregation and receipt printing."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path
from typing import Iterable, TextIO

from .items import LineItem
from .parser import iter_line_items
from .utils import format_amount, read_text_with_fallback

logger = logging.getLogger("receipt.basket")


@dataclass(frozen=True)
class Basket:
    """An ordered, read-only collection of line items."""

    items: tuple[LineItem, ...]

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "Basket":
        """Parse every line of ``lines``; the first bad line aborts the load."""

        items = tuple(iter_line_items(lines))
        logger.debug("Parsed %d line item(s)", len(items))
        return cls(items=items)

    @property
    def total_tax(self) -> Decimal:
        """Sum of the per-unit tax of each item scaled by its quantity."""

        return sum((item.total_tax for item in self.items), Decimal("0"))

    @property
    def total_price(self) -> Decimal:
        return sum((item.total_price for item in self.items), Decimal("0"))

    def receipt_lines(self) -> list[str]:
        """Return the receipt: one line per item, then the two totals."""

        lines = [item.receipt_line() for item in self.items]
        lines.append(f"Sales Taxes: {format_amount(self.total_tax)}")
        lines.append(f"Total: {format_amount(self.total_price)}")
        return lines

    def print_receipt(self, stream: TextIO | None = None) -> None:
        """Write the receipt to ``stream`` (standard output by default)."""

        text = "\n".join(self.receipt_lines()) + "\n"
        (stream or sys.stdout).write(text)


def load_basket(path: Path) -> Basket:
    """Read ``path`` and return the parsed :class:`Basket`."""

    text, encoding = read_text_with_fallback(path)
    if encoding != "utf-8":
        logger.warning("%s is not valid UTF-8, decoded as %s", path, encoding)
    logger.debug("Loading basket from %s", path)
    return Basket.from_lines(text.splitlines())


__all__ = ["Basket", "load_basket"]
