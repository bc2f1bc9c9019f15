"""Tax table data structures and helpers."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

ROUNDING_INCREMENT = Decimal("0.05")

EXEMPT_KEYWORDS = ("book", "chocolate", "pill")
IMPORTED_KEYWORD = "imported"


@dataclass(frozen=True)
class TaxEntry:
    """Representation of a tax table entry."""

    code: str
    description: str
    rate: Decimal


BASIC_SALES_TAX = TaxEntry(
    code="BASIC",
    description="Basic sales tax on goods other than books, food and medicine",
    rate=Decimal("10"),
)
IMPORT_DUTY = TaxEntry(
    code="IMPORT",
    description="Import duty on every imported good",
    rate=Decimal("5"),
)


def is_exempt(description: str) -> bool:
    """Return ``True`` when ``description`` names a basic-tax exempt good."""

    return any(keyword in description for keyword in EXEMPT_KEYWORDS)


def is_imported(description: str) -> bool:
    """Return ``True`` when ``description`` mentions an imported good."""

    return IMPORTED_KEYWORD in description


def applicable_taxes(description: str) -> tuple[TaxEntry, ...]:
    """Return the tax entries that apply to a good named ``description``."""

    taxes: list[TaxEntry] = []
    if not is_exempt(description):
        taxes.append(BASIC_SALES_TAX)
    if is_imported(description):
        taxes.append(IMPORT_DUTY)
    return tuple(taxes)


__all__ = [
    "BASIC_SALES_TAX",
    "EXEMPT_KEYWORDS",
    "IMPORT_DUTY",
    "IMPORTED_KEYWORD",
    "ROUNDING_INCREMENT",
    "TaxEntry",
    "applicable_taxes",
    "is_exempt",
    "is_imported",
]
