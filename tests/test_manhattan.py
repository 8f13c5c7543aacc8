from collections import Counter

import pytest

from gridspiral import ManhattanSpiral, manhattan_offset, InvalidDistanceError


def test_five_by_five(numbered):
    assert numbered(ManhattanSpiral(2, 2, 3), 5, 5) == [
        [ 0,  0, 12,  0,  0],
        [ 0, 11,  5, 13,  0],
        [10,  4,  1,  2,  6],
        [ 0,  9,  3,  7,  0],
        [ 0,  0,  8,  0,  0],
    ]


def test_seven_by_seven(numbered):
    assert numbered(ManhattanSpiral(3, 3, 4), 7, 7) == [
        [ 0,  0,  0, 23,  0,  0,  0],
        [ 0,  0, 22, 12, 24,  0,  0],
        [ 0, 21, 11,  5, 13, 25,  0],
        [20, 10,  4,  1,  2,  6, 14],
        [ 0, 19,  9,  3,  7, 15,  0],
        [ 0,  0, 18,  8, 16,  0,  0],
        [ 0,  0,  0, 17,  0,  0,  0],
    ]


def test_center_only():
    s = ManhattanSpiral(2, 2, 1)
    assert list(s) == [(2, 2)]
    with pytest.raises(StopIteration):
        next(s)


def test_ring_one():
    assert list(ManhattanSpiral(0, 0, 2)) == [(0, 0), (1, 0), (0, 1), (-1, 0), (0, -1)]


@pytest.mark.parametrize("m", [1, 2, 3, 6])
def test_rings(m):
    s = ManhattanSpiral(-7, 3, m)
    rings = Counter()
    seen = set()
    last = 0
    for x, y in s:
        r = s.ring
        assert r == abs(x+7) + abs(y-3)
        assert r >= last
        last = r
        rings[r] += 1
        seen.add((x, y))
    assert rings[0] == 1
    for r in range(1, m):
        assert rings[r] == 4*r
    assert max(rings) == m-1
    assert len(seen) == sum(rings.values()) == ManhattanSpiral.count(m)


def test_ring_starts_on_x_axis():
    s = ManhattanSpiral(0, 0, 5)
    res = list(s)
    for r in range(1, 5):
        first = 2*r*(r-1)+1
        assert res[first] == (r, 0)
        assert res[first+r] == (0, r)


def test_stays_exhausted():
    s = ManhattanSpiral(0, 0, 3)
    assert len(list(s)) == 13
    assert list(s) == []
    with pytest.raises(StopIteration):
        next(s)


def test_deterministic():
    assert list(ManhattanSpiral(1, 1, 6)) == list(ManhattanSpiral(1, 1, 6))


def test_closed_form():
    s = ManhattanSpiral(0, 0, 9)
    for n, pos in enumerate(s):
        assert manhattan_offset(n) == pos


@pytest.mark.parametrize("m", [0, -3])
def test_degenerate(m):
    with pytest.raises(InvalidDistanceError):
        ManhattanSpiral(0, 0, m)
