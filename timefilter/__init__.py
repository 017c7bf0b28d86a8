from .core import And, Or, RelativeTimeFilter, RowFilter, configure, filter_rows
from .interval import Interval
from .ranges import (
    ALL_TIME,
    CATALOG,
    DEFAULT_RANGE,
    NamedRange,
    get_named_range,
    list_range_names,
    resolve_range,
)

__all__ = [
    "Interval",
    "NamedRange",
    "ALL_TIME",
    "CATALOG",
    "DEFAULT_RANGE",
    "resolve_range",
    "get_named_range",
    "list_range_names",
    "RowFilter",
    "RelativeTimeFilter",
    "And",
    "Or",
    "configure",
    "filter_rows",
]
