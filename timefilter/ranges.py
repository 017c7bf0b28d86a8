"""Named relative time ranges.

A named range pairs a display name with a pure rule that turns a reference
instant into a concrete :class:`Interval`. The built-in ``CATALOG`` covers the
usual "Today", "Last 7 days", "Next 30 days" style choices and is resolved
once per filtering session.
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import datetime

from timefilter.interval import Interval
from timefilter.util import DAY, HOUR, first_of_month, first_of_year, midnight

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NamedRange:
    """A relative time range independent of any specific point in time.

    Attributes:
        name: Display name, unique within a catalog
        resolve: Pure function mapping a reference instant to an Interval
    """

    name: str
    resolve: Callable[[datetime], Interval]


def _all_time(now: datetime) -> Interval:
    # Bounds carry now's tzinfo so they compare with rows in the same frame
    return Interval(
        start=datetime.min.replace(tzinfo=now.tzinfo),
        end=datetime.max.replace(tzinfo=now.tzinfo),
    )


def _today(now: datetime) -> Interval:
    return Interval(start=midnight(now), end=now)


def _this_month(now: datetime) -> Interval:
    return Interval(start=first_of_month(now), end=now)


def _this_year(now: datetime) -> Interval:
    return Interval(start=first_of_year(now), end=now)


def _last_hours(hours: int) -> Callable[[datetime], Interval]:
    def rule(now: datetime) -> Interval:
        return Interval(start=now - HOUR * hours, end=now)

    return rule


def _past_days(days: int) -> Callable[[datetime], Interval]:
    """Whole days ending at (and excluding) today."""

    def rule(now: datetime) -> Interval:
        end = midnight(now)
        return Interval(start=end - DAY * days, end=end)

    return rule


def _next_days(days: int) -> Callable[[datetime], Interval]:
    """Whole days starting tomorrow."""

    def rule(now: datetime) -> Interval:
        start = midnight(now) + DAY
        return Interval(start=start, end=start + DAY * days)

    return rule


ALL_TIME = NamedRange("All time", _all_time)

CATALOG: tuple[NamedRange, ...] = (
    ALL_TIME,
    NamedRange("Today", _today),
    NamedRange("This month", _this_month),
    NamedRange("This year", _this_year),
    NamedRange("Last hour", _last_hours(1)),
    NamedRange("Last 24 hours", _last_hours(24)),
    NamedRange("Yesterday", _past_days(1)),
    NamedRange("Last 7 days", _past_days(7)),
    NamedRange("Last 30 days", _past_days(30)),
    NamedRange("Tomorrow", _next_days(1)),
    NamedRange("Next 7 days", _next_days(7)),
    NamedRange("Next 30 days", _next_days(30)),
)

DEFAULT_RANGE = ALL_TIME.name


def list_range_names(catalog: Sequence[NamedRange] = CATALOG) -> tuple[str, ...]:
    """Return the display names in catalog order; the first is the default."""
    return tuple(named.name for named in catalog)


def get_named_range(
    name: str, catalog: Sequence[NamedRange] = CATALOG
) -> NamedRange | None:
    """Return the first catalog entry whose name matches exactly, or None."""
    return next((named for named in catalog if named.name == name), None)


def resolve_range(
    name: str,
    now: datetime,
    catalog: Sequence[NamedRange] = CATALOG,
    strict: bool = False,
) -> Interval:
    """Resolve a range name against the reference instant ``now``.

    Args:
        name: Catalog name (exact, case-sensitive match)
        now: Reference instant the range is relative to
        catalog: Named ranges to search, defaults to the built-in CATALOG
        strict: Raise instead of falling back when ``name`` is unknown

    Returns:
        The resolved Interval. Unknown names resolve to "All time".

    Raises:
        ValueError: If ``strict`` is set and ``name`` is not in the catalog

    Example:
        >>> from datetime import datetime, timezone
        >>> now = datetime(2024, 3, 15, 14, 30, tzinfo=timezone.utc)
        >>> str(resolve_range("Tomorrow", now))
        'Interval(2024-03-16T00:00:00+00:00→2024-03-17T00:00:00+00:00, 1 day, 0:00:00)'
    """
    named = get_named_range(name, catalog)
    if named is None:
        if strict:
            valid = ", ".join(repr(n) for n in list_range_names(catalog))
            raise ValueError(
                f"Unknown time range {name!r}.\n"
                f"Valid ranges: {valid}\n"
                f"Hint: names are case-sensitive; pass strict=False to fall "
                f"back to {ALL_TIME.name!r}"
            )
        logger.warning(
            "Unknown time range %r, falling back to %r", name, ALL_TIME.name
        )
        named = ALL_TIME

    interval = named.resolve(now)
    logger.debug("Resolved time range %r at %s to %s", named.name, now, interval)
    return interval
