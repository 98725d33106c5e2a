"""Lazy enumeration of the lattice points on a diamond boundary."""

from __future__ import annotations

from typing import Iterator, Optional

from .types import Point


class PerimeterWalker:
    """Iterate every point at Manhattan distance exactly ``radius`` from ``center``.

    The walk starts at the top vertex and moves down one row at a time,
    yielding the left point of a row before the right one, and finishes on
    the bottom vertex. A walker is single use; build a new one to walk again.
    """

    def __init__(self, center: Point, radius: int):
        if radius < 0:
            raise ValueError(f"perimeter radius must be non-negative, got {radius}")
        self.center = center
        self.radius = radius
        self._cursor: Optional[Point] = Point(center.x, center.y + radius)

    def __iter__(self) -> Iterator[Point]:
        return self

    def __len__(self) -> int:
        return max(1, 4 * self.radius)

    def _x_offset(self, y: int) -> int:
        return self.radius - abs(y - self.center.y)

    def __next__(self) -> Point:
        cursor = self._cursor
        if cursor is None:
            raise StopIteration

        offset = self._x_offset(cursor.y)
        if offset > 0 and cursor.x == self.center.x - offset:
            # left point of a row, its mirror comes next
            self._cursor = Point(self.center.x + offset, cursor.y)
        else:
            next_y = cursor.y - 1
            if abs(next_y - self.center.y) > self.radius:
                self._cursor = None
            else:
                self._cursor = Point(self.center.x - self._x_offset(next_y), next_y)
        return cursor

    def __repr__(self) -> str:
        return f"PerimeterWalker(center={self.center}, radius={self.radius})"


__all__ = ["PerimeterWalker"]
