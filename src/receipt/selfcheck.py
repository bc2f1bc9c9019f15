"""Built-in check of the reference basket, run by ``register test``."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, TextIO

from .basket import Basket

REFERENCE_BASKET = """\
1 imported bottle of perfume at 27.99
1 bottle of perfume at 18.99
1 packet of headache pills at 9.75
3 box of imported chocolates at 11.25
"""


def reference_basket() -> Basket:
    return Basket.from_lines(REFERENCE_BASKET.splitlines())


@dataclass(frozen=True)
class Check:
    """A named assertion about the reference basket."""

    name: str
    predicate: Callable[[Basket], bool]

    def passes(self, basket: Basket) -> bool:
        return bool(self.predicate(basket))


CHECKS: tuple[Check, ...] = (
    Check("item count", lambda b: len(b.items) == 4),
    Check("first quantity", lambda b: b.items[0].quantity == 1),
    Check(
        "first description",
        lambda b: b.items[0].description == "imported bottle of perfume",
    ),
    Check("first unit price", lambda b: b.items[0].unit_price == Decimal("27.99")),
    Check("item 1 total", lambda b: b.items[0].total_price == Decimal("32.19")),
    Check("item 2 total", lambda b: b.items[1].total_price == Decimal("20.89")),
    Check("item 3 total", lambda b: b.items[2].total_price == Decimal("9.75")),
    Check("item 4 total", lambda b: b.items[3].total_price == Decimal("35.55")),
    Check("sales taxes", lambda b: b.total_tax == Decimal("7.90")),
    Check("basket total", lambda b: b.total_price == Decimal("98.38")),
)


def run(stream: TextIO | None = None) -> int:
    """Print ``.`` or ``F`` for every check and return the exit code."""

    out = stream or sys.stdout
    basket = reference_basket()
    failures = 0
    for check in CHECKS:
        if check.passes(basket):
            out.write(".")
        else:
            out.write("F")
            failures += 1
    out.write("\n")
    return 1 if failures else 0


__all__ = ["CHECKS", "Check", "REFERENCE_BASKET", "reference_basket", "run"]
