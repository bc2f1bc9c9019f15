"""Line item representation and per-item tax computation."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from . import tax_table
from .errors import NumericError
from .utils import format_amount, quantize_cents, round_up_to_increment

# Keeps every line total well inside the default 28-digit decimal context.
MAX_QUANTITY = 999_999_999
MAX_UNIT_PRICE = Decimal("999999999999.99")


@dataclass(frozen=True)
class LineItem:
    """One purchased line of a basket.

    Every derived amount is computed from ``quantity``, ``description`` and
    ``unit_price`` when requested; nothing is cached on the instance.
    """

    quantity: int
    description: str
    unit_price: Decimal

    def __post_init__(self) -> None:
        if not 1 <= self.quantity <= MAX_QUANTITY:
            raise NumericError(
                f"Quantity must be between 1 and {MAX_QUANTITY}, got {self.quantity}"
            )
        if not 0 <= self.unit_price <= MAX_UNIT_PRICE:
            raise NumericError(
                f"Unit price must be between 0 and {MAX_UNIT_PRICE}, got {self.unit_price}"
            )

    @property
    def is_exempt(self) -> bool:
        return tax_table.is_exempt(self.description)

    @property
    def is_imported(self) -> bool:
        return tax_table.is_imported(self.description)

    def tax_for_rate(self, rate: Decimal | int) -> Decimal:
        """Return the tax of one unit at ``rate`` percent.

        The raw amount is rounded up to the next multiple of 0.05.
        """

        raw = Decimal(rate) * self.unit_price / Decimal(100)
        return round_up_to_increment(raw, tax_table.ROUNDING_INCREMENT)

    @property
    def total_tax_per_unit(self) -> Decimal:
        """Basic sales tax plus import duty for a single unit."""

        taxes = tax_table.applicable_taxes(self.description)
        return quantize_cents(
            sum((self.tax_for_rate(entry.rate) for entry in taxes), Decimal("0"))
        )

    @property
    def total_tax(self) -> Decimal:
        """Tax for the whole line: the per-unit tax scaled by quantity."""

        return self.total_tax_per_unit * self.quantity

    @property
    def total_price(self) -> Decimal:
        """Price of the whole line, taxes included."""

        return quantize_cents(self.quantity * (self.unit_price + self.total_tax_per_unit))

    def receipt_line(self) -> str:
        return f"{self.quantity} {self.description}: {format_amount(self.total_price)}"

    def as_cells(self) -> list[object]:
        """Serialise the item for tabular export."""

        return [
            self.quantity,
            self.description,
            float(quantize_cents(self.unit_price)),
            float(self.total_tax_per_unit),
            float(self.total_price),
        ]


__all__ = ["LineItem"]
