from .types import (
    BeaconGapError,
    InvalidSegment,
    NoUniqueGap,
    NormalFormError,
    OutOfBounds,
    Point,
    Segment,
)
from .geometry import in_bounds, intersect_disk_row, manhattan_distance, tuning_frequency
from .coverage import Coverage
from .segments import IntervalSet
from .perimeter import PerimeterWalker
from .parser import parse_line, parse_report
from .validate import validate, ValidationError
from .config import SearchOptions, get_search_options, set_search_options
from .search import (
    count_excluded_on_row,
    find_gap,
    find_gap_by_perimeter_search,
    find_gap_by_row_scan,
    row_coverage,
    scan_row,
)

__all__ = [
    'BeaconGapError',
    'InvalidSegment',
    'NoUniqueGap',
    'NormalFormError',
    'OutOfBounds',
    'Point',
    'Segment',
    'in_bounds',
    'intersect_disk_row',
    'manhattan_distance',
    'tuning_frequency',
    'Coverage',
    'IntervalSet',
    'PerimeterWalker',
    'parse_line',
    'parse_report',
    'validate',
    'ValidationError',
    'SearchOptions',
    'get_search_options',
    'set_search_options',
    'count_excluded_on_row',
    'find_gap',
    'find_gap_by_perimeter_search',
    'find_gap_by_row_scan',
    'row_coverage',
    'scan_row',
]
