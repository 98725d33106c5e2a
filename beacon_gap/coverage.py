from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .geometry import intersect_disk_row, manhattan_distance
from .perimeter import PerimeterWalker
from .types import Point, Segment


@dataclass(frozen=True)
class Coverage:
    """A sensor, its closest beacon and the radius of the diamond it covers."""

    sensor: Point
    beacon: Point
    radius: int

    def __post_init__(self) -> None:
        expected = manhattan_distance(self.sensor, self.beacon)
        if self.radius != expected:
            raise ValueError(
                f"coverage radius {self.radius} does not match sensor-beacon distance {expected}"
            )

    @classmethod
    def new(cls, sensor: Point, beacon: Point) -> Coverage:
        return cls(sensor, beacon, manhattan_distance(sensor, beacon))

    def covers(self, point: Point) -> bool:
        return manhattan_distance(self.sensor, point) <= self.radius

    def row_slice(self, row: int) -> Optional[Segment]:
        return intersect_disk_row(self.sensor, self.radius, row)

    def perimeter(self, offset: int = 1) -> PerimeterWalker:
        """Walk the ring just outside (``offset=1``) the covered diamond."""
        return PerimeterWalker(self.sensor, self.radius + offset)


__all__ = ["Coverage"]
