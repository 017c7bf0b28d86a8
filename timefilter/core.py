import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from typing import Any, TypeVar

from dateutil.parser import isoparse
from typing_extensions import override

from timefilter.interval import Interval
from timefilter.ranges import CATALOG, DEFAULT_RANGE, NamedRange, resolve_range

logger = logging.getLogger(__name__)

Row = Mapping[str, Any]
RowT = TypeVar("RowT", bound=Row)


class RowFilter(ABC):

    @abstractmethod
    def keep(self, row: Row) -> bool:
        """Return True if the row passes this filter."""
        pass

    def __or__(self, other: "RowFilter") -> "RowFilter":
        if not isinstance(other, RowFilter):
            raise TypeError(
                f"Cannot union (|) a RowFilter with {type(other).__name__}.\n"
                f"Hint: Use | to combine filters: "
                f"configure('Today', ...) | configure('Yesterday', ...)"
            )
        return Or(self, other)

    def __and__(self, other: "RowFilter") -> "RowFilter":
        if not isinstance(other, RowFilter):
            raise TypeError(
                f"Cannot intersect (&) a RowFilter with {type(other).__name__}.\n"
                f"Hint: Use & to combine filters: "
                f"configure('This year', ...) & configure('Last 30 days', ...)"
            )
        return And(self, other)


@dataclass(frozen=True, init=False)
class Or(RowFilter):
    filters: tuple[RowFilter, ...]

    def __init__(self, *filters: RowFilter):
        object.__setattr__(self, "filters", filters)

    @override
    def keep(self, row: Row) -> bool:
        return any(f.keep(row) for f in self.filters)


@dataclass(frozen=True, init=False)
class And(RowFilter):
    filters: tuple[RowFilter, ...]

    def __init__(self, *filters: RowFilter):
        object.__setattr__(self, "filters", filters)

    @override
    def keep(self, row: Row) -> bool:
        return all(f.keep(row) for f in self.filters)


def _coerce_instant(value: Any, field: str) -> datetime:
    """Convert a row value to a datetime.

    Accepts:
    - datetime: Passed through as-is
    - date: Midnight at the start of that day
    - str: ISO 8601, parsed with dateutil's isoparse

    Dates and offset-less strings come back without tzinfo.

    Raises:
        TypeError: If the value is an unsupported type
        ValueError: If a string is not valid ISO 8601
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if isinstance(value, str):
        try:
            return isoparse(value)
        except ValueError as exc:
            raise ValueError(
                f"Row field {field!r} is not an ISO 8601 timestamp: {value!r}"
            ) from exc
    raise TypeError(
        f"Row field {field!r} must hold a datetime, date, or ISO 8601 string.\n"
        f"Got {type(value).__name__!r}: {value!r}\n"
        f"Hint: convert epoch numbers first, e.g.\n"
        f"  datetime.fromtimestamp(ts, tz=timezone.utc)"
    )


def _field_value(row: Row, field: str) -> datetime:
    try:
        value = row[field]
    except KeyError:
        available = ", ".join(repr(k) for k in row.keys())
        raise KeyError(
            f"Row has no field {field!r}. Available fields: {available}"
        ) from None
    return _coerce_instant(value, field)


@dataclass(frozen=True, kw_only=True)
class RelativeTimeFilter(RowFilter):
    """Keeps rows whose own interval overlaps a resolved reference interval.

    Attributes:
        interval: Reference interval, resolved once per session
        start_field: Row field holding the start timestamp
        end_field: Row field holding the end timestamp. When None the start
            value is used, so each row is an instantaneous event.
    """

    interval: Interval
    start_field: str
    end_field: str | None = None

    def _instant(self, row: Row, field: str) -> datetime:
        value = _field_value(row, field)
        # Zone-less values are read in the reference interval's frame
        if value.tzinfo is None:
            return value.replace(tzinfo=self.interval.start.tzinfo)
        return value

    def row_interval(self, row: Row) -> Interval:
        start = self._instant(row, self.start_field)
        if self.end_field is None:
            return Interval(start=start, end=start)
        return Interval(start=start, end=self._instant(row, self.end_field))

    @override
    def keep(self, row: Row) -> bool:
        return self.interval.overlaps(self.row_interval(row))


def configure(
    range_name: str = DEFAULT_RANGE,
    *,
    start_field: str,
    end_field: str | None = None,
    now: datetime | None = None,
    catalog: Sequence[NamedRange] = CATALOG,
    strict: bool = False,
) -> RelativeTimeFilter:
    """Resolve a named range once and return an immutable row filter.

    Args:
        range_name: Name from the catalog; unknown names mean "All time"
            unless ``strict`` is set
        start_field: Row field holding the start timestamp
        end_field: Optional row field holding the end timestamp
        now: Reference instant; defaults to the current UTC time, captured once
        catalog: Named ranges to resolve against
        strict: Raise ValueError for an unknown ``range_name``

    Example:
        >>> from timefilter import configure, filter_rows
        >>>
        >>> last_week = configure("Last 7 days", start_field="opened", end_field="closed")
        >>> recent = list(filter_rows(tickets, last_week))
        >>>
        >>> # Point events: no end field
        >>> today = configure("Today", start_field="timestamp")
    """
    if now is None:
        now = datetime.now(tz=timezone.utc)
    interval = resolve_range(range_name, now, catalog=catalog, strict=strict)
    logger.debug(
        "Configured filter on %r/%r for %s",
        start_field,
        end_field if end_field is not None else start_field,
        interval,
    )
    return RelativeTimeFilter(
        interval=interval, start_field=start_field, end_field=end_field
    )


def filter_rows(rows: Iterable[RowT], row_filter: RowFilter) -> Iterator[RowT]:
    """Lazily yield the rows the filter keeps; the rest are dropped."""
    return (row for row in rows if row_filter.keep(row))
