import argparse
import logging
import sys
from typing import Optional, Sequence

from beacon_gap import (
    NoUniqueGap,
    SearchOptions,
    ValidationError,
    count_excluded_on_row,
    find_gap,
    parse_report,
    tuning_frequency,
    validate,
)
from beacon_gap.config import DEFAULT_BOUND, DEFAULT_ROW, STRATEGIES, TUNING_MULTIPLIER

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Locate the beacon no sensor can see")
    parser.add_argument("path", help="Path to the sensor report")
    parser.add_argument(
        "--row",
        type=int,
        default=DEFAULT_ROW,
        help=f"Row on which to count excluded positions (default: {DEFAULT_ROW})",
    )
    parser.add_argument(
        "--bound",
        type=int,
        default=DEFAULT_BOUND,
        help=f"Upper bound of the search square [0, bound]^2 (default: {DEFAULT_BOUND})",
    )
    parser.add_argument(
        "--strategy",
        choices=STRATEGIES,
        default="perimeter",
        help="Gap search strategy (default: perimeter)",
    )
    parser.add_argument(
        "--multiplier",
        type=int,
        default=TUNING_MULTIPLIER,
        help=f"x multiplier of the tuning frequency (default: {TUNING_MULTIPLIER})",
    )
    parser.add_argument(
        "--batch-size",
        type=int,
        default=4096,
        help="Perimeter candidates tested per vectorised check (default: 4096)",
    )
    parser.add_argument(
        "--no-check-invariants",
        action="store_true",
        help="Skip the full interval set check after every scanned row",
    )
    parser.add_argument(
        "--log-every",
        type=int,
        default=0,
        help="Log row-scan progress every N rows (default: off)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    with open(args.path) as fin:
        text = fin.read()

    logger.info("Parsing report from %s", args.path)
    try:
        coverages = parse_report(text)
        validate(coverages, args.bound)
    except (SyntaxError, ValidationError) as exc:
        logger.error("Invalid report: %s", exc)
        raise SystemExit(1)
    logger.info("Loaded %d sensor(s)", len(coverages))

    try:
        options = SearchOptions(
            strategy=args.strategy,
            batch_size=args.batch_size,
            check_invariants=not args.no_check_invariants,
            log_every=args.log_every,
        )
    except ValueError as exc:
        logger.error("Invalid search options: %s", exc)
        raise SystemExit(1)

    excluded = count_excluded_on_row(coverages, args.row)
    print(f"Excluded positions on row {args.row}: {excluded}")

    try:
        gap = find_gap(coverages, args.bound, options=options)
    except NoUniqueGap as exc:
        logger.error("%s", exc)
        raise SystemExit(1)

    print(f"Gap: {gap}")
    print(f"Tuning frequency: {tuning_frequency(gap, args.multiplier)}")


if __name__ == "__main__":
    main(sys.argv[1:])
