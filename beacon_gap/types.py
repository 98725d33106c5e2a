from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple


class BeaconGapError(Exception):
    """Base class for recoverable errors raised by :mod:`beacon_gap`."""


class InvalidSegment(BeaconGapError, ValueError):
    """Raised when a segment is built with a zero or negative length."""


class OutOfBounds(BeaconGapError, ValueError):
    """Raised when a range or search bound is empty or negative."""


class NoUniqueGap(BeaconGapError, LookupError):
    """Raised when a search finds no single uncovered point."""


class NormalFormError(AssertionError):
    """Raised when an interval set stops being in coalesced normal form."""


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def manhattan_distance(self, other: Point) -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass(frozen=True)
class Segment:
    """Half-open integer range ``[start, start + length)``."""

    start: int
    length: int

    def __post_init__(self) -> None:
        if self.length < 1:
            raise InvalidSegment(
                f"segment starting at {self.start} must have a positive length, got {self.length}"
            )

    @property
    def end(self) -> int:
        """Exclusive right edge."""
        return self.start + self.length

    @property
    def last(self) -> int:
        return self.start + self.length - 1

    def __contains__(self, pos: object) -> bool:
        return isinstance(pos, int) and self.start <= pos < self.end

    def points(self) -> Iterator[int]:
        return iter(range(self.start, self.end))


__all__ = [
    "BeaconGapError",
    "InvalidSegment",
    "OutOfBounds",
    "NoUniqueGap",
    "NormalFormError",
    "Point",
    "Segment",
]
