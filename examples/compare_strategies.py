"""Example pipeline: parse a sensor report and locate the gap with both strategies."""

from beacon_gap import (
    count_excluded_on_row,
    find_gap_by_perimeter_search,
    find_gap_by_row_scan,
    parse_report,
    tuning_frequency,
    validate,
)

TEXT = """
Sensor at x=2, y=18: closest beacon is at x=-2, y=15
Sensor at x=9, y=16: closest beacon is at x=10, y=16
Sensor at x=13, y=2: closest beacon is at x=15, y=3
Sensor at x=12, y=14: closest beacon is at x=10, y=16
Sensor at x=10, y=20: closest beacon is at x=10, y=16
Sensor at x=14, y=17: closest beacon is at x=10, y=16
Sensor at x=8, y=7: closest beacon is at x=2, y=10
Sensor at x=2, y=0: closest beacon is at x=2, y=10
Sensor at x=0, y=11: closest beacon is at x=2, y=10
Sensor at x=20, y=14: closest beacon is at x=25, y=17
Sensor at x=17, y=20: closest beacon is at x=21, y=22
Sensor at x=16, y=7: closest beacon is at x=15, y=3
Sensor at x=14, y=3: closest beacon is at x=15, y=3
Sensor at x=20, y=1: closest beacon is at x=15, y=3
"""

BOUND = 20
ROW = 10


def main() -> None:
    coverages = parse_report(TEXT)
    validate(coverages, BOUND)

    print(f"Excluded positions on row {ROW}: {count_excluded_on_row(coverages, ROW)}")

    by_rows = find_gap_by_row_scan(coverages, BOUND)
    by_rings = find_gap_by_perimeter_search(coverages, BOUND)
    print(f"Row scan:         {by_rows}")
    print(f"Perimeter search: {by_rings}")
    if by_rings is not None:
        print(f"Tuning frequency: {tuning_frequency(by_rings)}")


if __name__ == "__main__":
    main()
