"""Lattice helpers for Manhattan diamonds."""

from __future__ import annotations

from typing import Optional

from .types import Point, Segment


def manhattan_distance(a: Point, b: Point) -> int:
    return abs(a.x - b.x) + abs(a.y - b.y)


def intersect_disk_row(center: Point, radius: int, row: int) -> Optional[Segment]:
    """Return the slice of the diamond around ``center`` lying on ``row``.

    ``None`` is returned when the row misses the diamond entirely.
    """

    dy = abs(center.y - row)
    if dy > radius:
        return None
    half_width = radius - dy
    return Segment(center.x - half_width, 2 * half_width + 1)


def in_bounds(point: Point, bound: int) -> bool:
    return 0 <= point.x <= bound and 0 <= point.y <= bound


def tuning_frequency(point: Point, multiplier: int = 4_000_000) -> int:
    return multiplier * point.x + point.y


__all__ = [
    "manhattan_distance",
    "intersect_disk_row",
    "in_bounds",
    "tuning_frequency",
]
