"""Coalescing set of disjoint integer intervals."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from typing import Dict, Iterable, Iterator, List, Optional

from .types import NormalFormError, OutOfBounds, Segment


class IntervalSet:
    """Ordered mapping ``start -> length`` kept in maximal coalesced form.

    For any two stored segments ``(s1, l1)`` and ``(s2, l2)`` with ``s1 < s2``
    the set guarantees ``s1 + l1 < s2``: stored segments never overlap and
    never touch. Starts live in a sorted list searched with :mod:`bisect`,
    lengths in a dict keyed by start.
    """

    def __init__(self, segments: Optional[Iterable[Segment]] = None):
        self._starts: List[int] = []
        self._lengths: Dict[int, int] = {}
        for segment in segments or ():
            self.add_segment(segment)

    @classmethod
    def from_segments(cls, segments: Iterable[Segment]) -> IntervalSet:
        return cls(segments)

    # ------------------------------------------------------------------
    # Mutation

    def add_segment(self, segment: Segment) -> None:
        """Insert ``segment``, merging it with every segment it overlaps or touches."""

        if not isinstance(segment, Segment):
            raise TypeError(f"expected Segment, got {type(segment).__name__}")

        start, end = segment.start, segment.end

        idx = bisect_left(self._starts, start) - 1
        if idx >= 0:
            prev = self._starts[idx]
            prev_end = prev + self._lengths[prev]
            if prev_end >= start:
                start = prev
                end = max(end, prev_end)

        first = bisect_left(self._starts, start)
        last = first
        while last < len(self._starts) and self._starts[last] <= end:
            key = self._starts[last]
            end = max(end, key + self._lengths[key])
            last += 1

        for key in self._starts[first:last]:
            del self._lengths[key]
        self._starts[first:last] = [start]
        self._lengths[start] = end - start

        self._verify_around(first)

    def remove_dot(self, pos: int) -> None:
        """Uncover the single position ``pos``; no-op when it is not covered."""

        idx = bisect_right(self._starts, pos) - 1
        if idx < 0:
            return
        start = self._starts[idx]
        length = self._lengths[start]
        end = start + length
        if pos >= end:
            return

        if length == 1:
            del self._starts[idx]
            del self._lengths[start]
        elif pos == start:
            del self._lengths[start]
            self._starts[idx] = start + 1
            self._lengths[start + 1] = length - 1
        elif pos == end - 1:
            self._lengths[start] = length - 1
        else:
            self._lengths[start] = pos - start
            self._starts.insert(idx + 1, pos + 1)
            self._lengths[pos + 1] = end - pos - 1

        self._verify_around(idx)

    # ------------------------------------------------------------------
    # Queries

    def get_inverse_on_range(self, a: int, b: int) -> IntervalSet:
        """Return the uncovered gaps of the closed range ``[a, b]``."""

        if a > b:
            raise OutOfBounds(f"empty range [{a}, {b}]")

        inverse = IntervalSet()
        cursor = a

        idx = bisect_left(self._starts, a) - 1
        if idx >= 0:
            prev = self._starts[idx]
            cursor = max(cursor, prev + self._lengths[prev])

        lo = bisect_left(self._starts, a)
        hi = bisect_right(self._starts, b)
        for start in self._starts[lo:hi]:
            if start > cursor:
                inverse.add_segment(Segment(cursor, start - cursor))
            cursor = start + self._lengths[start]

        if cursor <= b:
            inverse.add_segment(Segment(cursor, b + 1 - cursor))

        return inverse

    def get_covered(self) -> int:
        """Total number of distinct covered positions."""
        return sum(self._lengths.values())

    def single_point(self) -> Optional[int]:
        """Return the position when the set covers exactly one point."""

        if len(self._starts) != 1:
            return None
        start = self._starts[0]
        if self._lengths[start] != 1:
            return None
        return start

    def segments(self) -> List[Segment]:
        return [Segment(start, self._lengths[start]) for start in self._starts]

    def as_dict(self) -> Dict[int, int]:
        return {start: self._lengths[start] for start in self._starts}

    def copy(self) -> IntervalSet:
        clone = IntervalSet()
        clone._starts = list(self._starts)
        clone._lengths = dict(self._lengths)
        return clone

    # ------------------------------------------------------------------
    # Normal form

    def _check_pair(self, left: int, right: int) -> None:
        if left >= right:
            raise NormalFormError(f"starts out of order: {left} before {right}")
        left_end = left + self._lengths[left]
        if left_end >= right:
            raise NormalFormError(
                f"segment {left}+{self._lengths[left]} touches or overlaps segment at {right}"
            )

    def _verify_around(self, idx: int) -> None:
        """Check the entries neighbouring index ``idx`` after a local mutation."""

        if len(self._starts) != len(self._lengths):
            raise NormalFormError("start index and length table disagree")
        lo = max(idx - 1, 0)
        hi = min(idx + 3, len(self._starts))
        for k in range(lo, hi):
            start = self._starts[k]
            if self._lengths.get(start, 0) < 1:
                raise NormalFormError(f"segment at {start} has no positive length")
            if k + 1 < hi:
                self._check_pair(start, self._starts[k + 1])

    def check_normal_form(self) -> None:
        """Verify the whole set, raising :class:`NormalFormError` on violation."""

        if len(self._starts) != len(self._lengths):
            raise NormalFormError("start index and length table disagree")
        for k, start in enumerate(self._starts):
            if self._lengths.get(start, 0) < 1:
                raise NormalFormError(f"segment at {start} has no positive length")
            if k + 1 < len(self._starts):
                self._check_pair(start, self._starts[k + 1])

    # ------------------------------------------------------------------
    # Container protocol

    def __len__(self) -> int:
        return len(self._starts)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments())

    def __contains__(self, pos: object) -> bool:
        if not isinstance(pos, int):
            return False
        idx = bisect_right(self._starts, pos) - 1
        if idx < 0:
            return False
        start = self._starts[idx]
        return pos < start + self._lengths[start]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntervalSet):
            return NotImplemented
        return self._starts == other._starts and self._lengths == other._lengths

    def __repr__(self) -> str:
        return f"IntervalSet({self.as_dict()})"


__all__ = ["IntervalSet"]
