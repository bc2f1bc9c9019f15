"""Parse ``<quantity> <description> at <price>`` lines into line items."""

from __future__ import annotations

import re
from typing import Iterable, Iterator

from .errors import ParseError
from .items import LineItem
from .utils import parse_decimal, parse_quantity

# Anchored at the start only; text after the price is ignored.
LINE_PATTERN = re.compile(r"^(\d+) (.+) at (\d+\.\d+)", re.ASCII)


def parse_line(line: str, *, line_number: int | None = None) -> LineItem:
    """Return the :class:`LineItem` described by ``line``.

    Raises :class:`~receipt.errors.ParseError` when the line does not follow
    the expected grammar.
    """

    match = LINE_PATTERN.match(line)
    if match is None:
        raise ParseError(line, line_number=line_number)

    quantity, description, price = match.groups()
    return LineItem(
        quantity=parse_quantity(quantity),
        description=description.strip(),
        unit_price=parse_decimal(price),
    )


def iter_line_items(lines: Iterable[str]) -> Iterator[LineItem]:
    """Yield a :class:`LineItem` for every non-blank entry of ``lines``."""

    for number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        yield parse_line(line, line_number=number)


__all__ = ["LINE_PATTERN", "iter_line_items", "parse_line"]
