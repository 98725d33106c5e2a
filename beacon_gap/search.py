"""Row-scan and perimeter-search strategies for the uncovered point."""

from __future__ import annotations

import logging
from itertools import islice
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from .config import SearchOptions, get_search_options
from .coverage import Coverage
from .geometry import in_bounds, intersect_disk_row
from .logging_utils import apply_debug_logging
from .segments import IntervalSet
from .types import NoUniqueGap, OutOfBounds, Point

logger = logging.getLogger(__name__)


def _check_bound(bound: int) -> None:
    if bound < 0:
        raise OutOfBounds(f"search bound must be non-negative, got {bound}")


def row_coverage(coverages: Iterable[Coverage], row: int) -> IntervalSet:
    """Coalesce the slices of every diamond crossing ``row``."""

    covered = IntervalSet()
    for coverage in coverages:
        segment = intersect_disk_row(coverage.sensor, coverage.radius, row)
        if segment is not None:
            covered.add_segment(segment)
    return covered


def _row_gaps(
    coverages: Iterable[Coverage], row: int, bound: int, check_invariants: bool = False
) -> IntervalSet:
    covered = row_coverage(coverages, row)
    if check_invariants:
        covered.check_normal_form()
    return covered.get_inverse_on_range(0, bound)


def scan_row(coverages: Iterable[Coverage], row: int, bound: int) -> Optional[Point]:
    """Return the uncovered point of ``row`` when exactly one exists in ``[0, bound]``."""

    x = _row_gaps(coverages, row, bound).single_point()
    if x is None:
        return None
    return Point(x, row)


def count_excluded_on_row(coverages: Sequence[Coverage], row: int) -> int:
    """Count positions of ``row`` that are covered and hold no known beacon."""

    covered = row_coverage(coverages, row)
    for beacon in {coverage.beacon for coverage in coverages}:
        if beacon.y == row:
            covered.remove_dot(beacon.x)
    result = covered.get_covered()
    logger.info("Row %d: %d covered position(s) without a beacon", row, result)
    return result


def find_gap_by_row_scan(
    coverages: Sequence[Coverage],
    bound: int,
    options: Optional[SearchOptions] = None,
) -> Optional[Point]:
    """Scan rows ``0..bound`` and return the first row's single uncovered point."""

    _check_bound(bound)
    options = options or get_search_options()
    coverages = list(coverages)
    logger.info("Row scan over [0, %d] with %d coverage record(s)", bound, len(coverages))

    for row in range(bound + 1):
        gaps = _row_gaps(coverages, row, bound, options.check_invariants)
        if options.log_every and row % options.log_every == 0:
            logger.info("Row scan at row %d: %d gap segment(s)", row, len(gaps))
        x = gaps.single_point()
        if x is not None:
            point = Point(x, row)
            logger.info("Row scan found gap at %s", point)
            return point

    logger.info("Row scan found no single gap")
    return None


def _sensor_arrays(coverages: Sequence[Coverage]) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    sensor_x = np.array([c.sensor.x for c in coverages], dtype=np.int64)
    sensor_y = np.array([c.sensor.y for c in coverages], dtype=np.int64)
    radii = np.array([c.radius for c in coverages], dtype=np.int64)
    return sensor_x, sensor_y, radii


def _first_uncovered(
    candidates: List[Point],
    sensor_x: np.ndarray,
    sensor_y: np.ndarray,
    radii: np.ndarray,
) -> Optional[Point]:
    cx = np.fromiter((p.x for p in candidates), dtype=np.int64, count=len(candidates))
    cy = np.fromiter((p.y for p in candidates), dtype=np.int64, count=len(candidates))
    # (candidates, sensors) distance matrix
    distances = np.abs(cx[:, None] - sensor_x[None, :]) + np.abs(cy[:, None] - sensor_y[None, :])
    clear = (distances > radii[None, :]).all(axis=1)
    hits = np.flatnonzero(clear)
    if hits.size == 0:
        return None
    return candidates[int(hits[0])]


def find_gap_by_perimeter_search(
    coverages: Sequence[Coverage],
    bound: int,
    options: Optional[SearchOptions] = None,
) -> Optional[Point]:
    """Walk the ring just outside every diamond and return the first uncovered point.

    A single uncovered point in the square must sit at distance ``radius + 1``
    from at least one sensor, so the rings contain it. Each ring lies outside
    its own diamond, so testing a candidate against every sensor is the same
    as testing it against the other ones.
    """

    _check_bound(bound)
    options = options or get_search_options()
    coverages = list(coverages)
    sensor_x, sensor_y, radii = _sensor_arrays(coverages)

    if bound == 0:
        # a one-point square has no neighbour inside it, so no ring need reach it
        point = _first_uncovered([Point(0, 0)], sensor_x, sensor_y, radii)
        logger.info("Perimeter search on the one-point square: %s", point)
        return point

    if not coverages:
        return None

    logger.info("Perimeter search over [0, %d] with %d coverage record(s)", bound, len(coverages))

    for idx, coverage in enumerate(coverages):
        candidates = (p for p in coverage.perimeter() if in_bounds(p, bound))
        while True:
            batch = list(islice(candidates, options.batch_size))
            if not batch:
                break
            point = _first_uncovered(batch, sensor_x, sensor_y, radii)
            if point is not None:
                logger.info(
                    "Perimeter search found gap at %s on the ring of sensor %d at %s",
                    point,
                    idx,
                    coverage.sensor,
                )
                return point
        logger.debug("Ring of sensor %d at %s holds no gap", idx, coverage.sensor)

    logger.info("Perimeter search found no gap")
    return None


def find_gap(
    coverages: Sequence[Coverage],
    bound: int,
    strategy: Optional[str] = None,
    options: Optional[SearchOptions] = None,
) -> Point:
    """Run the selected strategy and raise :class:`NoUniqueGap` when it finds nothing."""

    options = options or get_search_options()
    strategy = strategy or options.strategy
    if strategy == "perimeter":
        point = find_gap_by_perimeter_search(coverages, bound, options)
    elif strategy == "row-scan":
        point = find_gap_by_row_scan(coverages, bound, options)
    else:
        raise ValueError(f"unknown strategy {strategy!r}")
    if point is None:
        raise NoUniqueGap(f"no single uncovered point in [0, {bound}] x [0, {bound}]")
    return point


apply_debug_logging(globals(), logger=logger, skip={"row_coverage", "scan_row"})


__all__ = [
    "row_coverage",
    "scan_row",
    "count_excluded_on_row",
    "find_gap_by_row_scan",
    "find_gap_by_perimeter_search",
    "find_gap",
]
