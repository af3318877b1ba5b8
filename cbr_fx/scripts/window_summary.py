"""Print min/max/average CBR exchange rates over a rolling window of days."""

from __future__ import annotations

import argparse
import logging
from typing import Sequence

from cbr_fx import CbrFx
from cbr_fx.report import render_table, write_csv
from cbr_fx.utils.cbr import DEFAULT_TIMEOUT, DEFAULT_WINDOW_DAYS
from cbr_fx.utils.date_range import parse_date
from cbr_fx.utils.logger import get_logger, set_level
from cbr_fx.window import WindowRunResult

LOGGER = get_logger(__name__)

__all__ = ["parse_args", "run", "main"]


def _positive_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"{value!r} is not an integer") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("days must be positive")
    return parsed


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--days",
        type=_positive_int,
        default=DEFAULT_WINDOW_DAYS,
        help=f"Number of calendar days to aggregate (default {DEFAULT_WINDOW_DAYS})",
    )
    parser.add_argument(
        "--end",
        dest="end",
        type=parse_date,
        help="Newest date of the window (YYYY-MM-DD)",
    )
    parser.add_argument(
        "--currency",
        dest="currencies",
        action="append",
        help="Only report this currency code (repeatable)",
    )
    parser.add_argument("--csv", dest="csv_path", help="Also write the summary to this CSV file")
    parser.add_argument(
        "--skip-repeated",
        action="store_true",
        default=False,
        help="Ignore weekend/holiday responses that repeat an already folded date",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=False,
        help="Abort on the first date that cannot be fetched or parsed",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help="Per-request timeout in seconds",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def run(args: argparse.Namespace) -> WindowRunResult:
    if args.verbose:
        set_level(logging.DEBUG)
    client = CbrFx(args.days, timeout=args.timeout, skip_repeated=args.skip_repeated)
    result = client.summary(args.end, strict=args.strict)
    print(render_table(result.results, args.currencies))
    if args.csv_path:
        csv_path = write_csv(result.results, args.csv_path, args.currencies)
        LOGGER.info("Saved summary → %s", csv_path)
    return result


def main(argv: Sequence[str] | None = None) -> None:
    run(parse_args(argv))


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    main()
