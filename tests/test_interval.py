"""Tests for half-open interval containment and overlap."""

from datetime import datetime, timedelta, timezone

import pytest

from timefilter import Interval


def at(*args: int) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


def test_contains_includes_start_excludes_end():
    """Test that contains() is inclusive at start and exclusive at end."""
    ivl = Interval(start=at(2024, 3, 1), end=at(2024, 3, 2))

    assert ivl.contains(at(2024, 3, 1))
    assert ivl.contains(at(2024, 3, 1, 12))
    assert not ivl.contains(at(2024, 3, 2))
    assert not ivl.contains(at(2024, 2, 29, 23, 59, 59))


@pytest.mark.parametrize(
    ("first", "second", "expected"),
    [
        # Partial overlap
        ((1, 5), (3, 8), True),
        # Containment
        ((1, 10), (3, 4), True),
        # Adjacent: end is exclusive
        ((1, 3), (3, 5), False),
        # Disjoint
        ((1, 2), (5, 6), False),
        # Identical
        ((2, 4), (2, 4), True),
    ],
)
def test_overlaps_is_symmetric(first, second, expected):
    """Test that overlaps() gives the same answer in both directions."""
    x = Interval(start=at(2024, 3, first[0]), end=at(2024, 3, first[1]))
    y = Interval(start=at(2024, 3, second[0]), end=at(2024, 3, second[1]))

    assert x.overlaps(y) is expected
    assert y.overlaps(x) is expected


def test_zero_length_never_overlaps_itself():
    """Test that a point interval neither overlaps nor contains itself."""
    t = at(2024, 3, 5)
    point = Interval(start=t, end=t)

    assert not point.overlaps(point)
    assert not point.contains(t)


def test_zero_length_overlaps_only_when_strictly_inside():
    """Test that a point overlaps a window only strictly between its bounds."""
    window = Interval(start=at(2024, 3, 1), end=at(2024, 3, 8))

    assert window.overlaps(Interval(start=at(2024, 3, 4), end=at(2024, 3, 4)))
    # A point on either boundary is not strictly straddled
    assert not window.overlaps(Interval(start=at(2024, 3, 1), end=at(2024, 3, 1)))
    assert not window.overlaps(Interval(start=at(2024, 3, 8), end=at(2024, 3, 8)))


def test_inverted_interval_is_allowed_and_never_overlaps():
    """Test that mis-paired bounds are not rejected and just match nothing."""
    inverted = Interval(start=at(2024, 3, 6), end=at(2024, 3, 4))
    window = Interval(start=at(2024, 3, 5), end=at(2024, 3, 5, 12))

    assert inverted.duration < timedelta(0)
    assert not inverted.overlaps(window)
    assert not window.overlaps(inverted)


def test_interval_is_immutable():
    """Test that interval bounds cannot be reassigned."""
    ivl = Interval(start=at(2024, 3, 1), end=at(2024, 3, 2))

    with pytest.raises(AttributeError):
        ivl.start = at(2024, 1, 1)  # type: ignore[misc]


def test_str_shows_bounds_and_duration():
    """Test that str() shows both ISO bounds and the duration."""
    ivl = Interval(start=at(2024, 3, 1), end=at(2024, 3, 1, 2))

    assert str(ivl) == (
        "Interval(2024-03-01T00:00:00+00:00→2024-03-01T02:00:00+00:00, 2:00:00)"
    )
