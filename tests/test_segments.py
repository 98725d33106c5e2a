import random

import pytest

from beacon_gap.segments import IntervalSet
from beacon_gap.types import InvalidSegment, NormalFormError, OutOfBounds, Segment


def seg(start, length):
    return Segment(start, length)


def points_of(intervals):
    return {p for s in intervals for p in s.points()}


def assert_normal_form(intervals):
    starts = list(intervals.as_dict().items())
    for (s1, l1), (s2, _) in zip(starts, starts[1:]):
        assert s1 + l1 < s2


@pytest.mark.parametrize(
    'added, expected',
    [
        (seg(4, 1), {3: 4}),
        (seg(3, 1), {3: 4}),
        (seg(6, 1), {3: 4}),
        (seg(3, 4), {3: 4}),
        (seg(2, 1), {2: 5}),
        (seg(2, 2), {2: 5}),
        (seg(7, 1), {3: 5}),
        (seg(6, 2), {3: 5}),
        (seg(2, 6), {2: 6}),
        (seg(0, 2), {0: 2, 3: 4}),
        (seg(9, 2), {3: 4, 9: 2}),
    ],
)
def test_add_segment_merges_against_single_segment(added, expected):
    intervals = IntervalSet()
    intervals.add_segment(seg(3, 4))

    intervals.add_segment(added)

    assert intervals.as_dict() == expected


def test_add_segment_first_segment_is_stored_as_is():
    intervals = IntervalSet()
    intervals.add_segment(seg(3, 4))
    assert intervals.as_dict() == {3: 4}
    assert repr(intervals) == 'IntervalSet({3: 4})'


def test_add_segment_bridges_several_segments():
    intervals = IntervalSet([seg(0, 2), seg(4, 1), seg(7, 3), seg(20, 1)])

    intervals.add_segment(seg(1, 6))

    assert intervals.as_dict() == {0: 10, 20: 1}


def test_add_segment_absorbs_segment_starting_at_same_key():
    intervals = IntervalSet([seg(5, 2)])
    intervals.add_segment(seg(5, 6))
    assert intervals.as_dict() == {5: 6}


def test_add_segment_is_idempotent():
    once = IntervalSet([seg(-4, 3), seg(10, 2)])
    once.add_segment(seg(0, 5))
    twice = once.copy()
    twice.add_segment(seg(0, 5))
    assert once == twice


def test_add_segment_rejects_non_segments():
    with pytest.raises(TypeError):
        IntervalSet().add_segment((3, 4))


@pytest.mark.parametrize('length', [0, -1])
def test_segment_rejects_non_positive_length(length):
    with pytest.raises(InvalidSegment):
        Segment(3, length)


def test_add_segment_of_empty_range_fails_before_touching_the_set():
    intervals = IntervalSet([seg(0, 2)])
    with pytest.raises(InvalidSegment):
        intervals.add_segment(Segment(5, 0))
    assert intervals.as_dict() == {0: 2}


@pytest.mark.parametrize(
    'pos, expected',
    [
        (2, {3: 4}),
        (7, {3: 4}),
        (3, {4: 3}),
        (6, {3: 3}),
        (5, {3: 2, 6: 1}),
        (4, {3: 1, 5: 2}),
    ],
)
def test_remove_dot(pos, expected):
    intervals = IntervalSet([seg(3, 4)])

    intervals.remove_dot(pos)

    assert intervals.as_dict() == expected


def test_remove_dot_on_single_point_segment_deletes_it():
    intervals = IntervalSet([seg(3, 1)])
    intervals.remove_dot(3)
    assert intervals.as_dict() == {}
    assert len(intervals) == 0


def test_remove_dot_between_segments_is_noop():
    intervals = IntervalSet([seg(0, 2), seg(5, 2)])
    intervals.remove_dot(3)
    assert intervals.as_dict() == {0: 2, 5: 2}


@pytest.mark.parametrize(
    'stored, expected',
    [
        ([], {3: 8}),
        ([seg(0, 1), seg(12, 3)], {3: 8}),
        ([seg(0, 3), seg(11, 3)], {3: 8}),
        ([seg(0, 4), seg(10, 3)], {4: 6}),
        ([seg(3, 8)], {}),
        ([seg(3, 2)], {5: 6}),
        ([seg(9, 2)], {3: 6}),
        ([seg(5, 2)], {3: 2, 7: 4}),
        ([seg(4, 1), seg(7, 1)], {3: 1, 5: 2, 8: 3}),
        ([seg(-10, 30)], {}),
    ],
)
def test_get_inverse_on_range(stored, expected):
    intervals = IntervalSet(stored)

    result = intervals.get_inverse_on_range(3, 10)

    assert result.as_dict() == expected


def test_get_inverse_on_single_position_range():
    assert IntervalSet().get_inverse_on_range(4, 4).as_dict() == {4: 1}
    assert IntervalSet([seg(4, 1)]).get_inverse_on_range(4, 4).as_dict() == {}


def test_get_inverse_rejects_reversed_range():
    with pytest.raises(OutOfBounds):
        IntervalSet().get_inverse_on_range(10, 3)


def test_get_inverse_leaves_source_untouched():
    intervals = IntervalSet([seg(5, 2)])
    intervals.get_inverse_on_range(0, 10)
    assert intervals.as_dict() == {5: 2}


def test_get_covered_sums_lengths():
    intervals = IntervalSet([seg(0, 3), seg(2, 4), seg(10, 2)])
    assert intervals.get_covered() == 8


def test_single_point():
    assert IntervalSet([seg(7, 1)]).single_point() == 7
    assert IntervalSet([seg(7, 2)]).single_point() is None
    assert IntervalSet([seg(1, 1), seg(7, 1)]).single_point() is None
    assert IntervalSet().single_point() is None


def test_contains_and_iteration():
    intervals = IntervalSet([seg(0, 2), seg(5, 1)])
    assert 1 in intervals
    assert 2 not in intervals
    assert 5 in intervals
    assert -1 not in intervals
    assert list(intervals) == [seg(0, 2), seg(5, 1)]


def test_check_normal_form_detects_touching_segments():
    intervals = IntervalSet([seg(0, 2), seg(5, 1)])
    intervals._lengths[0] = 5
    with pytest.raises(NormalFormError):
        intervals.check_normal_form()


def test_random_mutations_keep_normal_form_and_match_brute_force():
    rng = random.Random(1234)
    for _ in range(200):
        intervals = IntervalSet()
        expected = set()
        for _ in range(rng.randint(1, 12)):
            if rng.random() < 0.7:
                start = rng.randint(-15, 15)
                length = rng.randint(1, 8)
                intervals.add_segment(seg(start, length))
                expected.update(range(start, start + length))
            else:
                pos = rng.randint(-15, 20)
                intervals.remove_dot(pos)
                expected.discard(pos)
            assert_normal_form(intervals)
            intervals.check_normal_form()
        assert points_of(intervals) == expected
        assert intervals.get_covered() == len(expected)


def test_random_double_complement_restores_clipped_set():
    rng = random.Random(99)
    for _ in range(200):
        intervals = IntervalSet(
            seg(rng.randint(-10, 20), rng.randint(1, 6)) for _ in range(rng.randint(0, 6))
        )
        a = rng.randint(-5, 10)
        b = a + rng.randint(0, 12)

        inverse = intervals.get_inverse_on_range(a, b)
        restored = inverse.get_inverse_on_range(a, b)

        clipped = {p for p in points_of(intervals) if a <= p <= b}
        assert points_of(inverse) == set(range(a, b + 1)) - clipped
        assert points_of(restored) == clipped
        assert_normal_form(inverse)
        assert_normal_form(restored)
