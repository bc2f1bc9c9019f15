"""Exceptions raised while loading a basket."""

from __future__ import annotations


class ReceiptError(Exception):
    """Base class for every error raised by :mod:`receipt`."""


class ParseError(ReceiptError, ValueError):
    """A line does not follow ``<quantity> <description> at <price>``."""

    def __init__(self, line: str, *, line_number: int | None = None) -> None:
        self.line = line
        self.line_number = line_number
        where = f"line {line_number}" if line_number is not None else "line"
        super().__init__(f"Cannot parse {where}: {line.rstrip()!r}")


class NumericError(ReceiptError, ValueError):
    """A quantity or price is not a valid number."""


__all__ = ["NumericError", "ParseError", "ReceiptError"]
