from typing import Dict, Optional, Sequence

from .coverage import Coverage
from .types import BeaconGapError, Point


class ValidationError(BeaconGapError):
    pass


def validate(coverages: Sequence[Coverage], bound: Optional[int] = None) -> None:
    if not coverages:
        raise ValidationError('report holds no sensors')
    if bound is not None and bound < 0:
        raise ValidationError(f'search bound must be non-negative, got {bound}')

    seen: Dict[Point, int] = {}
    for idx, c in enumerate(coverages):
        if not isinstance(c, Coverage):
            raise ValidationError(f'[record {idx}] expected Coverage, got {type(c).__name__}')
        if c.sensor in seen:
            raise ValidationError(
                f'[record {idx}] sensor at {c.sensor} already reported by record {seen[c.sensor]}'
            )
        seen[c.sensor] = idx
