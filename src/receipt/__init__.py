"""Top level package for the point-of-sale receipt calculator.

The public API is small: parse text lines into :class:`~receipt.items.LineItem`
objects, collect them in a :class:`~receipt.basket.Basket` and print or
export the resulting receipt.
"""

__all__ = [
    "basket",
    "cli",
    "errors",
    "items",
    "parser",
    "report",
    "selfcheck",
    "tax_table",
    "utils",
]
