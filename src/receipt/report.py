"""Write receipts to Excel workbooks."""

from __future__ import annotations

from pathlib import Path

from openpyxl import Workbook

from .basket import Basket

HEADER = ("Quantity", "Description", "Unit price", "Tax per unit", "Total")


def default_report_destination(source: Path) -> Path:
    """Return the workbook path used when no explicit destination is given."""

    return source.with_name(f"{source.stem}_receipt.xlsx")


def write_excel_report(basket: Basket, destination: Path) -> Path:
    """Generate an Excel workbook with every item and the basket totals."""

    destination.parent.mkdir(parents=True, exist_ok=True)

    workbook = Workbook()
    worksheet = workbook.active
    worksheet.title = "Receipt"
    worksheet.append(list(HEADER))

    for item in basket.items:
        worksheet.append(item.as_cells())

    worksheet.append([])
    worksheet.append(["Sales Taxes", None, None, None, float(basket.total_tax)])
    worksheet.append(["Total", None, None, None, float(basket.total_price)])

    workbook.save(destination)
    return destination


__all__ = ["HEADER", "default_report_destination", "write_excel_report"]
