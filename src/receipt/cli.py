"""Command line entry point for the receipt calculator."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Sequence

from . import selfcheck
from .basket import load_basket
from .errors import ReceiptError
from .report import default_report_destination, write_excel_report

SELF_TEST_TOKEN = "test"

_TRUTHY = {"1", "true", "yes", "on"}

logger = logging.getLogger("receipt.cli")


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for ``register``."""

    parser = argparse.ArgumentParser(
        prog="register",
        description=(
            "Print a sales receipt for a basket file, or pass 'test' to run "
            "the built-in checks."
        ),
    )
    parser.add_argument(
        "source",
        help="Basket file with one '<quantity> <description> at <price>' per line, or 'test'",
    )
    report = parser.add_mutually_exclusive_group()
    report.add_argument(
        "--report",
        type=Path,
        metavar="XLSX",
        help="Also write the receipt to this Excel workbook",
    )
    report.add_argument(
        "--report-default",
        action="store_true",
        help="Also write the receipt to <basket>_receipt.xlsx next to the input",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging (also set by RECEIPT_VERBOSE=1)",
    )
    return parser


def _verbose_from_env() -> bool:
    return os.getenv("RECEIPT_VERBOSE", "").strip().lower() in _TRUTHY


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def main(argv: Sequence[str] | None = None) -> int:
    """Execute the command line interface."""

    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose or _verbose_from_env())

    if args.source == SELF_TEST_TOKEN:
        return selfcheck.run()

    source = Path(args.source)
    try:
        basket = load_basket(source)
        lines = basket.receipt_lines()
        destination = None
        if args.report is not None:
            destination = write_excel_report(basket, args.report)
        elif args.report_default:
            destination = write_excel_report(basket, default_report_destination(source))
    except (ReceiptError, OSError) as exc:
        print(f"register: {exc}", file=sys.stderr)
        return 1

    print("\n".join(lines))
    if destination is not None:
        logger.info("Receipt workbook saved to %s", destination)
    return 0


if __name__ == "__main__":  # pragma: no cover - direct execution
    raise SystemExit(main())
